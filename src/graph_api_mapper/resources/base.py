# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from typing import Annotated, Any, ClassVar, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from graph_api_mapper.mapping.bindings import Embedded, FieldBinding, build_bindings
from graph_api_mapper.mapping.mapper import default_mapper

G = TypeVar("G", bound="GraphModel")


class GraphModel(BaseModel):
    """
    Base model for all Graph API objects.
    Wire keys are snake_case like the attributes; any other wire name is a Field alias.
    Instances are frozen once decoded and unknown keys are ignored to stay forward compatible.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    __graph_bindings__: ClassVar[Tuple[FieldBinding, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__graph_bindings__ = build_bindings(cls)

    @classmethod
    def from_graph(cls: Type[G], data: Any) -> G:
        """Decode a parsed JSON object with the default mapper."""
        return default_mapper.to_object(data, cls)

    @classmethod
    def from_graph_json(cls: Type[G], text: Union[str, bytes]) -> G:
        """Parse and decode raw JSON text with the default mapper."""
        return default_mapper.from_json(text, cls)


class Identity(GraphModel):
    """Opaque resource ID. Kept as a string so large numeric IDs lose no precision."""

    id: Optional[str] = None


class NamedIdentity(GraphModel):
    """ID and display name, used both as embedded identity and as a reference to another object."""

    id: Optional[str] = None
    name: Optional[str] = None


class CategorizedIdentity(GraphModel):
    id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None


class GraphResource(GraphModel):
    """
    A Graph API object with identity.
    The identity is read from the same JSON object as the resource's own fields;
    subclasses narrow it to NamedIdentity or CategorizedIdentity where the type has a name.
    """

    identity: Annotated[Identity, Embedded()] = Field(default_factory=Identity)

    @property
    def id(self) -> Optional[str]:
        return self.identity.id

    @property
    def name(self) -> Optional[str]:
        return getattr(self.identity, "name", None)
