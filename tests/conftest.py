# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

from typing import Any, Dict, List

import pytest

from graph_api_mapper.mapping import FieldMismatch, GraphMapper


@pytest.fixture
def mismatches() -> List[FieldMismatch]:
    return []


@pytest.fixture
def mapper(mismatches: List[FieldMismatch]) -> GraphMapper:
    """Mapper that records every reported field mismatch."""
    return GraphMapper(on_mismatch=mismatches.append)


@pytest.fixture
def photo_payload() -> Dict[str, Any]:
    return {
        "id": "20",
        "name": "Beach",
        "from": {"id": "1", "name": "Mark", "category": "Person"},
        "picture": "https://example.com/p_s.jpg",
        "source": "https://example.com/p_n.jpg",
        "width": 100,
        "height": 50,
        "link": "https://example.com/photo.php?fbid=20",
        "icon": "https://example.com/icon.gif",
        "position": 3,
        "created_time": "2012-01-01T00:00:00+0000",
        "updated_time": "2012-01-02T10:30:00+0000",
        "backdated_time": "2011-12-25T08:00:00+0000",
        "backdated_time_granularity": "day",
        "tags": {
            "data": [
                {"id": "5", "name": "Ann", "x": 10.0, "y": 20.0, "created_time": "2012-01-01T00:05:00+0000"},
            ]
        },
        "comments": {
            "data": [
                {"id": "20_1", "from": {"id": "5", "name": "Ann"}, "message": "Nice", "like_count": 2},
            ],
            "paging": {"next": "https://example.com/next"},
        },
        "likes": {"data": [{"id": "7", "name": "Bob"}, {"id": "8", "name": "Eve"}]},
        "images": [
            {"height": 720, "width": 960, "source": "https://example.com/p_o.jpg"},
            {"height": 75, "width": 100, "source": "https://example.com/p_t.jpg"},
        ],
        "place": {
            "id": "30",
            "name": "Ocean Beach",
            "category": "Beach",
            "location": {"city": "San Francisco", "country": "United States", "latitude": 37.76, "longitude": -122.51},
        },
    }
