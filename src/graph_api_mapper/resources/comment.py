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
from typing import Optional

from pydantic import Field

from graph_api_mapper.resources.base import GraphResource, NamedIdentity
from graph_api_mapper.utils.dates import parse_long_format


class Comment(GraphResource):
    """
    Graph API Comment type.
    """

    from_: Optional[NamedIdentity] = Field(None, alias="from")
    message: Optional[str] = None
    like_count: Optional[int] = None
    user_likes: Optional[bool] = None
    can_remove: Optional[bool] = None
    comment_count: Optional[int] = None

    # Older API versions sent the like count under "likes".
    likes: Optional[int] = Field(None, deprecated="Use like_count instead.")

    created_time_raw: Optional[str] = Field(None, alias="created_time", repr=False)

    @property
    def created_time(self) -> Optional[datetime]:
        """The time the comment was made."""
        return parse_long_format(self.created_time_raw)
