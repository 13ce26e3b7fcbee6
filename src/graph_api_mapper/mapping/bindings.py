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
Field bindings: the declarative table the mapper walks.

A binding is derived once per model class from its pydantic fields. The wire
name is the field alias when one is declared, the attribute name otherwise.
"""

import numbers
import types
from enum import StrEnum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.fields import FieldInfo


class JsonShape(StrEnum):
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"  # Not producible by a JSON parser


class FieldShape(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"  # Nested model under its own key
    SEQUENCE = "sequence"
    EMBEDDED = "embedded"  # Nested model read from the enclosing JSON object


def shape_of(value: Any) -> JsonShape:
    if value is None:
        return JsonShape.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return JsonShape.BOOLEAN
    # Decimal and friends, e.g. from json.loads(..., parse_float=Decimal)
    if isinstance(value, numbers.Number):
        return JsonShape.NUMBER
    if isinstance(value, str):
        return JsonShape.STRING
    if isinstance(value, dict):
        return JsonShape.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonShape.ARRAY
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def wire_shape(value: Any) -> JsonShape:
    """Like shape_of, but anything a JSON parser cannot produce is UNKNOWN."""
    try:
        return shape_of(value)
    except TypeError:
        return JsonShape.UNKNOWN


class Tolerate:
    """
    Field metadata listing alternate wire shapes that are expected for a field.
    A value arriving in one of these shapes is discarded without a mismatch report,
    e.g. ``comments`` sometimes comes back as ``{"count": 0}`` instead of a list.
    """

    __slots__ = ("shapes",)

    def __init__(self, *shapes: JsonShape):
        self.shapes: FrozenSet[JsonShape] = frozenset(shapes)

    def __repr__(self) -> str:
        return f"Tolerate({', '.join(sorted(self.shapes))})"


class Embedded:
    """Field metadata: decode the nested model from the same JSON object as its owner."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Embedded()"


SCALAR_SHAPES: Dict[type, FieldShape] = {
    str: FieldShape.STRING,
    int: FieldShape.NUMBER,
    float: FieldShape.NUMBER,
    bool: FieldShape.BOOLEAN,
}

# Read-only after import; shared by every decode.
SCALAR_ADAPTERS: Dict[type, TypeAdapter[Any]] = {
    str: TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True)),
    int: TypeAdapter(int),
    float: TypeAdapter(float),
    bool: TypeAdapter(bool),
}


class FieldBinding(BaseModel):
    """
    Pairing of a wire key with a typed attribute slot.
    ``target`` is a scalar type for scalar shapes, a model class for nested shapes
    and the element type for sequences.
    """

    name: str
    wire_name: str
    shape: FieldShape
    target: Any
    item_shape: Optional[FieldShape] = None
    tolerated: FrozenSet[JsonShape] = frozenset()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_root_list(cls, model: Type[BaseModel]) -> "FieldBinding":
        return cls(name="", wire_name="", shape=FieldShape.SEQUENCE, target=model, item_shape=FieldShape.OBJECT)


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_model(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, BaseModel)


def _element_shape(owner: Type[BaseModel], name: str, target: Any) -> FieldShape:
    if _is_model(target):
        return FieldShape.OBJECT
    if target in SCALAR_SHAPES:
        return SCALAR_SHAPES[target]
    raise TypeError(f"{owner.__name__}.{name}: unsupported sequence element type {target!r}")


def _binding_for(owner: Type[BaseModel], name: str, info: FieldInfo) -> FieldBinding:
    wire_name = info.alias or name
    tolerated: FrozenSet[JsonShape] = frozenset()
    embedded = False
    for meta in info.metadata:
        if isinstance(meta, Tolerate):
            tolerated = tolerated | meta.shapes
        elif isinstance(meta, Embedded):
            embedded = True

    target = _unwrap_optional(info.annotation)

    if get_origin(target) is tuple:
        args = get_args(target)
        if len(args) != 2 or args[1] is not Ellipsis:
            raise TypeError(f"{owner.__name__}.{name}: sequences must be declared as Tuple[T, ...]")
        item = _unwrap_optional(args[0])
        return FieldBinding(
            name=name,
            wire_name=wire_name,
            shape=FieldShape.SEQUENCE,
            target=item,
            item_shape=_element_shape(owner, name, item),
            tolerated=tolerated,
        )

    if _is_model(target):
        shape = FieldShape.EMBEDDED if embedded else FieldShape.OBJECT
        return FieldBinding(name=name, wire_name=wire_name, shape=shape, target=target, tolerated=tolerated)

    if embedded:
        raise TypeError(f"{owner.__name__}.{name}: only nested models can be embedded")

    if target in SCALAR_SHAPES:
        return FieldBinding(
            name=name, wire_name=wire_name, shape=SCALAR_SHAPES[target], target=target, tolerated=tolerated
        )

    raise TypeError(f"{owner.__name__}.{name}: unsupported field type {info.annotation!r}")


def build_bindings(model: Type[BaseModel]) -> Tuple[FieldBinding, ...]:
    """Build the binding table for a model class from its declared fields."""
    bindings: List[FieldBinding] = [_binding_for(model, name, info) for name, info in model.model_fields.items()]
    return tuple(bindings)
