# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from typing import Annotated, Dict, List, Optional, Tuple

import pytest

from graph_api_mapper.mapping.bindings import (
    Embedded,
    FieldShape,
    JsonShape,
    Tolerate,
    build_bindings,
    shape_of,
)
from graph_api_mapper.resources import GraphModel, Identity, Note, Photo


def _by_name(model: type) -> dict:
    return {binding.name: binding for binding in model.__graph_bindings__}


def test_shape_of_json_values() -> None:
    assert shape_of(None) == JsonShape.NULL
    assert shape_of(True) == JsonShape.BOOLEAN
    assert shape_of(0) == JsonShape.NUMBER
    assert shape_of(1.5) == JsonShape.NUMBER
    assert shape_of("x") == JsonShape.STRING
    assert shape_of({}) == JsonShape.OBJECT
    assert shape_of([]) == JsonShape.ARRAY


def test_shape_of_rejects_non_json() -> None:
    with pytest.raises(TypeError):
        shape_of(object())


def test_wire_name_defaults_to_attribute_name() -> None:
    bindings = _by_name(Note)
    assert bindings["subject"].wire_name == "subject"
    assert bindings["subject"].shape == FieldShape.STRING


def test_alias_overrides_wire_name() -> None:
    bindings = _by_name(Note)
    assert bindings["from_"].wire_name == "from"
    assert bindings["from_"].shape == FieldShape.OBJECT
    assert bindings["created_time_raw"].wire_name == "created_time"


def test_shapes_derived_from_annotations() -> None:
    bindings = _by_name(Photo)
    assert bindings["width"].shape == FieldShape.NUMBER
    assert bindings["width"].target is int
    assert bindings["identity"].shape == FieldShape.EMBEDDED
    assert bindings["tags"].shape == FieldShape.SEQUENCE
    assert bindings["tags"].item_shape == FieldShape.OBJECT
    assert bindings["place"].shape == FieldShape.OBJECT


def test_tolerated_shapes_recorded() -> None:
    assert _by_name(Note)["comments"].tolerated == frozenset({JsonShape.OBJECT})
    assert _by_name(Photo)["comments"].tolerated == frozenset()


def test_scalar_sequences_supported() -> None:
    class Labels(GraphModel):
        labels: Tuple[str, ...] = ()
        flags: Optional[bool] = None

    bindings = _by_name(Labels)
    assert bindings["labels"].item_shape == FieldShape.STRING
    assert bindings["flags"].shape == FieldShape.BOOLEAN


def test_build_bindings_is_idempotent() -> None:
    assert build_bindings(Photo) == Photo.__graph_bindings__


def test_unsupported_field_type_rejected() -> None:
    with pytest.raises(TypeError, match="unsupported field type"):

        class Bad(GraphModel):
            payload: Optional[Dict[str, str]] = None


def test_list_sequences_rejected() -> None:
    with pytest.raises(TypeError, match="unsupported field type"):

        class Bad(GraphModel):
            items: List[str] = []


def test_only_models_can_be_embedded() -> None:
    with pytest.raises(TypeError, match="only nested models"):

        class Bad(GraphModel):
            id: Annotated[Optional[str], Embedded()] = None


def test_tolerate_repr() -> None:
    assert repr(Tolerate(JsonShape.OBJECT)) == "Tolerate(object)"
    assert _by_name(Identity)["id"].shape == FieldShape.STRING
