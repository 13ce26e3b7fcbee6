# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic_core import from_json

from graph_api_mapper import config
from graph_api_mapper.exceptions import DecodeError
from graph_api_mapper.mapping.bindings import (
    SCALAR_ADAPTERS,
    FieldBinding,
    FieldShape,
    JsonShape,
    wire_shape,
)
from graph_api_mapper.utils.logger import logger

M = TypeVar("M", bound=BaseModel)


class FieldMismatch(BaseModel):
    """A field whose wire value did not match its declared shape and was skipped."""

    model: str
    attribute: str
    wire_name: str
    expected: FieldShape
    actual: JsonShape
    path: str

    model_config = ConfigDict(frozen=True)


MismatchHook = Callable[[FieldMismatch], None]


class _Skip:
    __slots__ = ()


_SKIP = _Skip()


def log_mismatch(mismatch: FieldMismatch) -> None:
    logger.info(
        f"Ignoring {mismatch.model}.{mismatch.attribute} at '{mismatch.path}': "
        f"expected {mismatch.expected}, got {mismatch.actual}"
    )


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _integral_text(value: Any) -> Optional[str]:
    """Decimal text for integral floats and Decimals, which str() would print in exponent form."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return str(int(value))
    return None


def _unwrap_connection(value: Any) -> Optional[List[Any]]:
    """
    Return the list carried by a sequence value, or None if it carries none.
    Graph API connections wrap lists as {"data": [...], "paging": {...}} and some
    endpoints send {} where they mean an empty list.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, dict):
        data = value.get("data")
        if isinstance(data, (list, tuple)):
            return list(data)
        if not value:
            return []
    return None


def _bindings(model: Type[BaseModel]) -> Tuple[FieldBinding, ...]:
    bindings = getattr(model, "__graph_bindings__", None)
    if bindings is None:
        raise TypeError(f"{model.__name__} is not a graph model")
    return bindings  # type: ignore[no-any-return]


class GraphMapper:
    """
    Decodes parsed Graph API JSON into immutable graph models.

    Only structural failures (a root that is not an object, or not a list where a
    list is required) raise DecodeError. Field-level problems leave the field at
    its zero value and are passed to ``on_mismatch`` when one is set.
    """

    def __init__(self, on_mismatch: Optional[MismatchHook] = None):
        self.on_mismatch = on_mismatch

    def to_object(self, data: Any, model: Type[M]) -> M:
        _bindings(model)
        if not isinstance(data, dict):
            logger.debug(f"Refusing to decode {model.__name__} from {wire_shape(data)}")
            raise DecodeError(model, f"expected a JSON object, got {wire_shape(data)}")
        return self._decode_object(data, model, "")

    def to_list(self, data: Any, model: Type[M]) -> Tuple[M, ...]:
        _bindings(model)
        items = _unwrap_connection(data)
        if items is None:
            logger.debug(f"Refusing to decode a list of {model.__name__} from {wire_shape(data)}")
            raise DecodeError(model, f"expected a JSON array, got {wire_shape(data)}")
        return tuple(self._decode_items(items, FieldBinding.for_root_list(model), model, ""))

    def from_json(self, text: Union[str, bytes], model: Type[M]) -> M:
        return self.to_object(self._parse(text, model), model)

    def list_from_json(self, text: Union[str, bytes], model: Type[M]) -> Tuple[M, ...]:
        return self.to_list(self._parse(text, model), model)

    @staticmethod
    def _parse(text: Union[str, bytes], model: Type[BaseModel]) -> Any:
        try:
            return from_json(text)
        except ValueError as e:
            logger.debug(f"Unparseable JSON for {model.__name__}: {e}")
            raise DecodeError(model, f"invalid JSON: {e}") from e

    def _decode_object(self, node: Dict[str, Any], model: Type[M], path: str) -> M:
        values: Dict[str, Any] = {}
        for binding in _bindings(model):
            if binding.shape is FieldShape.EMBEDDED:
                values[binding.name] = self._decode_object(node, binding.target, path)
                continue

            raw = node.get(binding.wire_name)
            if raw is None:
                continue

            value = self._decode_value(raw, binding, model, _join(path, binding.wire_name))
            if value is not _SKIP:
                values[binding.name] = value

        # Values are already coerced to their declared types.
        return model.model_construct(**values)

    def _decode_value(self, raw: Any, binding: FieldBinding, model: Type[BaseModel], path: str) -> Any:
        if binding.shape is FieldShape.SEQUENCE:
            items = _unwrap_connection(raw)
            if items is None:
                self._mismatch(binding, model, binding.shape, wire_shape(raw), path)
                return _SKIP
            # Built as a list, exposed as a tuple.
            return tuple(self._decode_items(items, binding, model, path))

        if binding.shape is FieldShape.OBJECT:
            if not isinstance(raw, dict):
                self._mismatch(binding, model, binding.shape, wire_shape(raw), path)
                return _SKIP
            return self._decode_object(raw, binding.target, path)

        return self._decode_scalar(raw, binding.target, binding.shape, binding, model, path)

    def _decode_items(
        self, items: List[Any], binding: FieldBinding, model: Type[BaseModel], path: str
    ) -> Iterator[Any]:
        assert binding.item_shape is not None
        for index, item in enumerate(items):
            item_path = f"{path}[{index}]"
            if item is None:
                continue
            if binding.item_shape is FieldShape.OBJECT:
                if not isinstance(item, dict):
                    self._mismatch(binding, model, binding.item_shape, wire_shape(item), item_path)
                    continue
                yield self._decode_object(item, binding.target, item_path)
                continue
            value = self._decode_scalar(item, binding.target, binding.item_shape, binding, model, item_path)
            if value is not _SKIP:
                yield value

    def _decode_scalar(
        self, raw: Any, target: type, shape: FieldShape, binding: FieldBinding, model: Type[BaseModel], path: str
    ) -> Any:
        actual = wire_shape(raw)
        unusable = actual in (JsonShape.OBJECT, JsonShape.ARRAY, JsonShape.UNKNOWN)
        if unusable or (actual is JsonShape.BOOLEAN and target is not bool):
            self._mismatch(binding, model, shape, actual, path)
            return _SKIP
        if target is str and actual is JsonShape.NUMBER:
            text = _integral_text(raw)
            if text is not None:
                return text
        try:
            return SCALAR_ADAPTERS[target].validate_python(raw)
        except ValueError:
            self._mismatch(binding, model, shape, actual, path)
            return _SKIP

    def _mismatch(
        self, binding: FieldBinding, model: Type[BaseModel], expected: FieldShape, actual: JsonShape, path: str
    ) -> None:
        # Tolerated shapes are known alternate encodings, not schema drift.
        if actual in binding.tolerated or self.on_mismatch is None:
            return
        self.on_mismatch(
            FieldMismatch(
                model=model.__name__,
                attribute=binding.name,
                wire_name=binding.wire_name,
                expected=expected,
                actual=actual,
                path=path,
            )
        )


def mapper_from_env() -> GraphMapper:
    """Mapper configured from the environment; see graph_api_mapper.config."""
    return GraphMapper(on_mismatch=log_mismatch if config.LOG_MISMATCHES else None)


default_mapper = mapper_from_env()
