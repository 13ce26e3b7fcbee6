# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/graph_api_mapper

import logging
import sys
from pathlib import Path
from typing import TextIO

from graph_api_mapper.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"


class LazyDirFileHandler(logging.FileHandler):
    """FileHandler that creates its directory on first write instead of at import."""

    def _open(self) -> TextIO:
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


logger = logging.getLogger("graph_api_mapper")
logger.setLevel(LOG_LEVEL)

# Reloading this module must not stack duplicate handlers on the shared logger.
if not logger.handlers:
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    file_handler = LazyDirFileHandler(Path(LOG_DIR) / "graph_api_mapper.log", encoding="utf-8", delay=True)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

__all__ = ["LazyDirFileHandler", "logger"]
