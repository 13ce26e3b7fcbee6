# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

"""
Typed, immutable views over Graph API JSON responses.
"""

from graph_api_mapper.exceptions import DecodeError, GraphApiMapperError
from graph_api_mapper.mapping import FieldMismatch, GraphMapper, JsonShape, Tolerate, default_mapper
from graph_api_mapper.resources import (
    CategorizedIdentity,
    Comment,
    GraphModel,
    GraphResource,
    Identity,
    Image,
    Location,
    NamedIdentity,
    Note,
    Photo,
    Place,
    Tag,
)
from graph_api_mapper.utils.dates import parse_long_format

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "GraphApiMapperError",
    "FieldMismatch",
    "GraphMapper",
    "JsonShape",
    "Tolerate",
    "default_mapper",
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
    "parse_long_format",
]
