# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from graph_api_mapper.mapping.bindings import (
    Embedded,
    FieldBinding,
    FieldShape,
    JsonShape,
    Tolerate,
    build_bindings,
    shape_of,
)
from graph_api_mapper.mapping.mapper import (
    FieldMismatch,
    GraphMapper,
    MismatchHook,
    default_mapper,
    log_mismatch,
    mapper_from_env,
)

__all__ = [
    "Embedded",
    "FieldBinding",
    "FieldMismatch",
    "FieldShape",
    "GraphMapper",
    "JsonShape",
    "MismatchHook",
    "Tolerate",
    "build_bindings",
    "default_mapper",
    "log_mismatch",
    "mapper_from_env",
    "shape_of",
]
