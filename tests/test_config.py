# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

import importlib

import pytest

from graph_api_mapper import config
from graph_api_mapper.config import env_flag
from graph_api_mapper.mapping import default_mapper, log_mismatch, mapper_from_env
from graph_api_mapper.resources import Photo


@pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
def test_env_flag_truthy(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("GRAPH_API_MAPPER_TEST_FLAG", value)
    assert env_flag("GRAPH_API_MAPPER_TEST_FLAG") is True


@pytest.mark.parametrize("value", ["0", "false", "no", "", "maybe"])
def test_env_flag_falsy(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("GRAPH_API_MAPPER_TEST_FLAG", value)
    assert env_flag("GRAPH_API_MAPPER_TEST_FLAG", default=True) is False


def test_env_flag_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRAPH_API_MAPPER_TEST_FLAG", raising=False)
    assert env_flag("GRAPH_API_MAPPER_TEST_FLAG") is False
    assert env_flag("GRAPH_API_MAPPER_TEST_FLAG", default=True) is True


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GRAPH_API_MAPPER_LOG_LEVEL", "GRAPH_API_MAPPER_LOG_DIR", "GRAPH_API_MAPPER_LOG_MISMATCHES"):
        monkeypatch.delenv(name, raising=False)

    importlib.reload(config)

    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_DIR == "logs"
    assert config.LOG_MISMATCHES is False


def test_log_mismatches_enables_logging_hook(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPH_API_MAPPER_LOG_MISMATCHES", "true")
    importlib.reload(config)
    try:
        assert mapper_from_env().on_mismatch is log_mismatch
    finally:
        monkeypatch.delenv("GRAPH_API_MAPPER_LOG_MISMATCHES")
        importlib.reload(config)

    assert mapper_from_env().on_mismatch is None


def test_default_mapper_is_silent_by_default() -> None:
    assert default_mapper.on_mismatch is None


def test_log_mismatches_flag_alone_emits_records(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Setting only the flag, with the default log level, makes mismatches visible."""
    monkeypatch.delenv("GRAPH_API_MAPPER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("GRAPH_API_MAPPER_LOG_MISMATCHES", "true")
    importlib.reload(config)
    try:
        mapper_from_env().to_object({"id": "20", "tags": "none"}, Photo)
    finally:
        monkeypatch.delenv("GRAPH_API_MAPPER_LOG_MISMATCHES")
        importlib.reload(config)

    messages = [r.getMessage() for r in caplog.records if r.name == "graph_api_mapper"]
    assert "Ignoring Photo.tags at 'tags': expected sequence, got string" in messages
