# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from graph_api_mapper.resources.base import (
    CategorizedIdentity,
    GraphModel,
    GraphResource,
    Identity,
    NamedIdentity,
)
from graph_api_mapper.resources.comment import Comment
from graph_api_mapper.resources.note import Note
from graph_api_mapper.resources.photo import Image, Photo, Tag
from graph_api_mapper.resources.place import Location, Place

__all__ = [
    "GraphModel",
    "GraphResource",
    "Identity",
    "NamedIdentity",
    "CategorizedIdentity",
    "Comment",
    "Note",
    "Photo",
    "Tag",
    "Image",
    "Place",
    "Location",
]
