# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

import os

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


LOG_LEVEL = os.getenv("GRAPH_API_MAPPER_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("GRAPH_API_MAPPER_LOG_DIR", "logs")

# Field-level shape mismatches are absorbed by the mapper. Turning this on makes
# the default mapper report each one through the package logger at DEBUG level.
LOG_MISMATCHES = env_flag("GRAPH_API_MAPPER_LOG_MISMATCHES")
