# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from typing import Annotated, Optional

from pydantic import Field

from graph_api_mapper.mapping.bindings import Embedded
from graph_api_mapper.resources.base import CategorizedIdentity, GraphModel, GraphResource


class Location(GraphModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Place(GraphResource):
    """
    Graph API Place type: a categorized page with a location.
    """

    identity: Annotated[CategorizedIdentity, Embedded()] = Field(default_factory=CategorizedIdentity)
    location: Optional[Location] = None

    @property
    def category(self) -> Optional[str]:
        return self.identity.category
