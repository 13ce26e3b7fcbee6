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
Graph API Photo type and the records nested inside it.
"""

from datetime import datetime
from typing import Annotated, Optional, Tuple

from pydantic import Field

from graph_api_mapper.mapping.bindings import Embedded
from graph_api_mapper.resources.base import CategorizedIdentity, GraphModel, GraphResource, NamedIdentity
from graph_api_mapper.resources.comment import Comment
from graph_api_mapper.resources.place import Place
from graph_api_mapper.utils.dates import parse_long_format


class Tag(GraphResource):
    """
    A user tagged in a photo.
    x and y are percentages of the photo's width and height from its left and top edges.
    """

    identity: Annotated[NamedIdentity, Embedded()] = Field(default_factory=NamedIdentity)
    x: Optional[float] = None
    y: Optional[float] = None

    created_time_raw: Optional[str] = Field(None, alias="created_time", repr=False)

    @property
    def created_time(self) -> Optional[datetime]:
        return parse_long_format(self.created_time_raw)


class Image(GraphModel):
    """One stored rendition of a photo."""

    height: Optional[int] = None
    width: Optional[int] = None
    source: Optional[str] = None


class Photo(GraphResource):
    identity: Annotated[NamedIdentity, Embedded()] = Field(default_factory=NamedIdentity)

    from_: Optional[CategorizedIdentity] = Field(None, alias="from")  # Who posted the photo
    picture: Optional[str] = None  # Album-sized view
    source: Optional[str] = None  # Full-sized source
    height: Optional[int] = None
    width: Optional[int] = None
    link: Optional[str] = None
    icon: Optional[str] = None
    position: Optional[int] = Field(
        None, deprecated="The Graph API returns 0 for position since October 3, 2012."
    )
    place: Optional[Place] = None
    backdated_time_granularity: Optional[str] = None

    tags: Tuple[Tag, ...] = ()
    comments: Tuple[Comment, ...] = ()
    likes: Tuple[NamedIdentity, ...] = ()
    images: Tuple[Image, ...] = ()

    created_time_raw: Optional[str] = Field(None, alias="created_time", repr=False)
    updated_time_raw: Optional[str] = Field(None, alias="updated_time", repr=False)
    backdated_time_raw: Optional[str] = Field(None, alias="backdated_time", repr=False)

    @property
    def created_time(self) -> Optional[datetime]:
        """The time the photo was initially published."""
        return parse_long_format(self.created_time_raw)

    @property
    def updated_time(self) -> Optional[datetime]:
        """The last time the photo or its caption was updated."""
        return parse_long_format(self.updated_time_raw)

    @property
    def backdated_time(self) -> Optional[datetime]:
        return parse_long_format(self.backdated_time_raw)
