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
Date helpers for the Graph API wire formats.

The API sends timestamps in its own "long format" (``2012-01-01T00:00:00+0000``),
which is close to, but not, ISO-8601: the UTC offset has no colon. Older endpoints
fall back to a zone-less variant or to raw UNIX timestamps.
"""

from datetime import datetime, timezone
from typing import Optional

LONG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
LONG_DATE_FORMAT_WITHOUT_TIMEZONE = "%Y-%m-%dT%H:%M:%S"
LONG_DATE_FORMAT_WITHOUT_TIMEZONE_OR_SECONDS = "%Y-%m-%dT%H:%M"

_NAIVE_FORMATS = (LONG_DATE_FORMAT_WITHOUT_TIMEZONE, LONG_DATE_FORMAT_WITHOUT_TIMEZONE_OR_SECONDS)


def _parse(value: str, date_format: str) -> Optional[datetime]:
    try:
        return datetime.strptime(value, date_format)
    except ValueError:
        return None


def parse_long_format(value: Optional[str]) -> Optional[datetime]:
    """
    Convert a long-format timestamp into a timezone-aware datetime.
    Returns None for missing or unparseable input, never raises.
    """
    if value is None:
        return None

    value = value.strip()
    if not value:
        return None

    # All-numeric dates are UNIX timestamps.
    if value.isdigit():
        try:
            return datetime.fromtimestamp(int(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    parsed = _parse(value, LONG_DATE_FORMAT)
    if parsed is not None:
        return parsed

    for date_format in _NAIVE_FORMATS:
        parsed = _parse(value, date_format)
        if parsed is not None:
            return parsed.replace(tzinfo=timezone.utc)

    return None
