# Copyright 2025 TIER IV, INC. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Packed compression settings.

A compression setting is an int packing the compression algorithm and the
    compression level as `<algorithm> * 100 + <level>`. Only the codec knows how
    to interpret the packed value, the options only carry it around.
"""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

MAX_COMPRESSION_LEVEL = 99


class CompressionAlgorithm(IntEnum):
    USE_GLOBAL = 0
    ZLIB = 1
    LZMA = 2
    OLD_COMPRESSION_ALGO = 3
    LZ4 = 4
    ZSTD = 5
    UNDEFINED = 6


class CompressionLevel(IntEnum):
    UNCOMPRESSED = 0
    DEFAULT_ZLIB = 1
    DEFAULT_LZ4 = 4
    DEFAULT_ZSTD = 5
    DEFAULT_OLD = 6
    DEFAULT_LZMA = 7


class CompressionDefaults(IntEnum):
    USE_GLOBAL = 0
    USE_COMPILED_DEFAULT = 505
    USE_ANALYSIS = 404
    USE_GENERAL_PURPOSE = 505
    USE_SMALLEST = 207


def compression_settings(algorithm: int, level: int) -> int:
    """Compose the packed compression setting from <algorithm> and <level>.

    Level is clamped into [0, 99], unknown algorithm falls back to USE_GLOBAL.
    """
    if level < 0:
        level = 0
    elif level > MAX_COMPRESSION_LEVEL:
        level = MAX_COMPRESSION_LEVEL

    if algorithm < 0 or algorithm >= CompressionAlgorithm.UNDEFINED:
        logger.debug(f"unknown compression algorithm {algorithm}, use global")
        algorithm = CompressionAlgorithm.USE_GLOBAL
    return int(algorithm) * 100 + int(level)
