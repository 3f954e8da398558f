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
"""Unit tests for _compression.py module."""

from __future__ import annotations

import pytest

from ntuple_options._compression import (
    CompressionAlgorithm,
    CompressionDefaults,
    CompressionLevel,
    compression_settings,
)


class TestCompressionSettings:
    """Tests for compression_settings function."""

    @pytest.mark.parametrize(
        ("algorithm", "level", "expected"),
        [
            (CompressionAlgorithm.ZSTD, CompressionLevel.DEFAULT_ZSTD, 505),
            (CompressionAlgorithm.ZLIB, CompressionLevel.DEFAULT_ZLIB, 101),
            (CompressionAlgorithm.LZMA, CompressionLevel.DEFAULT_LZMA, 207),
            (CompressionAlgorithm.LZ4, CompressionLevel.DEFAULT_LZ4, 404),
            (CompressionAlgorithm.ZLIB, CompressionLevel.UNCOMPRESSED, 100),
            (CompressionAlgorithm.USE_GLOBAL, 0, 0),
        ],
    )
    def test_compose(self, algorithm: int, level: int, expected: int):
        """Test composing the packed setting."""
        assert compression_settings(algorithm, level) == expected

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(-3, 500), (99, 599), (100, 599), (1000, 599)],
    )
    def test_level_clamped(self, level: int, expected: int):
        """Test that the level is clamped into [0, 99]."""
        assert compression_settings(CompressionAlgorithm.ZSTD, level) == expected

    @pytest.mark.parametrize(
        "algorithm", [CompressionAlgorithm.UNDEFINED, 7, 42, -1]
    )
    def test_unknown_algorithm_falls_back_to_global(self, algorithm: int):
        """Test that unknown algorithms fall back to USE_GLOBAL."""
        assert compression_settings(algorithm, 5) == 5

    def test_returns_plain_int(self):
        """Test that the result is a plain int, not an enum member."""
        result = compression_settings(
            CompressionAlgorithm.LZ4, CompressionLevel.DEFAULT_LZ4
        )
        assert type(result) is int


class TestCompressionDefaults:
    """Tests for the predefined compression settings."""

    def test_general_purpose_is_zstd_default(self):
        """Test that general purpose setting is zstd with default level."""
        assert CompressionDefaults.USE_GENERAL_PURPOSE == compression_settings(
            CompressionAlgorithm.ZSTD, CompressionLevel.DEFAULT_ZSTD
        )

    def test_analysis_is_lz4_default(self):
        """Test that analysis setting is lz4 with default level."""
        assert CompressionDefaults.USE_ANALYSIS == compression_settings(
            CompressionAlgorithm.LZ4, CompressionLevel.DEFAULT_LZ4
        )

    def test_smallest_is_lzma_default(self):
        """Test that smallest setting is lzma with default level."""
        assert CompressionDefaults.USE_SMALLEST == compression_settings(
            CompressionAlgorithm.LZMA, CompressionLevel.DEFAULT_LZMA
        )
