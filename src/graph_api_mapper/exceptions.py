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
Mapper Exceptions
"""

from typing import Any


class GraphApiMapperError(Exception):
    """Base class for errors raised by graph_api_mapper."""

    pass


class DecodeError(GraphApiMapperError):
    """Raised when a JSON value cannot be decoded at all (structural failure)."""

    def __init__(self, model: type[Any], reason: str):
        self.model = model
        self.reason = reason
        super().__init__(f"Cannot decode {model.__name__}: {reason}")
