# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from datetime import datetime
from typing import Annotated, Optional, Tuple

from pydantic import Field

from graph_api_mapper.mapping.bindings import JsonShape, Tolerate
from graph_api_mapper.resources.base import GraphResource, NamedIdentity
from graph_api_mapper.resources.comment import Comment
from graph_api_mapper.utils.dates import parse_long_format


class Note(GraphResource):
    """
    Graph API Note type.
    """

    from_: Optional[NamedIdentity] = Field(None, alias="from")  # Author of the note
    subject: Optional[str] = None
    message: Optional[str] = None  # HTML
    icon: Optional[str] = None

    created_time_raw: Optional[str] = Field(None, alias="created_time", repr=False)
    updated_time_raw: Optional[str] = Field(None, alias="updated_time", repr=False)

    # The API sometimes returns {"count": 0} here instead of a list of comments.
    comments: Annotated[Tuple[Comment, ...], Tolerate(JsonShape.OBJECT)] = ()

    @property
    def created_time(self) -> Optional[datetime]:
        """The time the note was initially published."""
        return parse_long_format(self.created_time_raw)

    @property
    def updated_time(self) -> Optional[datetime]:
        """The time the note was last updated."""
        return parse_long_format(self.updated_time_raw)
