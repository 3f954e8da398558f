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
"""Unit tests for _common.py module."""

from __future__ import annotations

import logging

import pytest

from ntuple_options._common import (
    configure_logging,
    exit_with_err_msg,
    human_readable_size,
    parse_size,
)


class TestHumanReadableSize:
    """Tests for human_readable_size function."""

    @pytest.mark.parametrize(
        ("input_bytes", "expected"),
        [
            (0, "0 Bytes"),
            (1, "1 Bytes"),
            (512, "512 Bytes"),
            (1000, "1000 Bytes"),  # no decimal units for display
            (1024, "1024 Bytes"),  # Exactly 1 KiB stays as Bytes (> 1 check)
            (1025, "1.00 KiB"),
            (50_000_000, "47.68 MiB"),
            (64 * 1024, "64.00 KiB"),
            (1024**2 + 512 * 1024, "1.50 MiB"),
            (512 * 1024**2, "512.00 MiB"),
            (2 * 1024**3 + 512 * 1024**2, "2.50 GiB"),
        ],
    )
    def test_human_readable_size(self, input_bytes: int, expected: str):
        """Test conversion of bytes to human-readable format."""
        assert human_readable_size(input_bytes) == expected


class TestParseSize:
    """Tests for parse_size function."""

    @pytest.mark.parametrize(
        ("_in", "expected"),
        [
            (65536, 65536),
            (0, 0),
            ("65536", 65536),
            ("64KiB", 64 * 1024),
            ("64 KiB", 64 * 1024),
            ("512MiB", 512 * 1024**2),
            ("50MB", 50 * 1000**2),
            ("1GB", 1000**3),
            ("2gib", 2 * 1024**3),
            ("100B", 100),
            ("100Bytes", 100),
        ],
    )
    def test_parse_size(self, _in: int | str, expected: int):
        """Test parsing ints and strings with units."""
        assert parse_size(_in) == expected

    @pytest.mark.parametrize(
        "_in",
        ["", "abc", "64 PiB", "-1KiB", "1.5MiB", True],
    )
    def test_invalid_size(self, _in):
        """Test that unparsable sizes raise ValueError."""
        with pytest.raises(ValueError):
            parse_size(_in)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_sets_package_logger_level(self):
        """Test that the package logger is set to INFO."""
        _root_logger = logging.getLogger()
        _options_logger = logging.getLogger("ntuple_options")
        _root_level, _options_level = _root_logger.level, _options_logger.level
        try:
            configure_logging()

            assert _options_logger.level == logging.INFO
            assert _root_logger.level == logging.CRITICAL
        finally:
            _root_logger.setLevel(_root_level)
            _options_logger.setLevel(_options_level)


class TestExitWithErrMsg:
    """Tests for exit_with_err_msg function."""

    def test_exits_with_code(self, capsys: pytest.CaptureFixture[str]):
        """Test that the error message is printed and exit code is used."""
        with pytest.raises(SystemExit) as exc_info:
            exit_with_err_msg("something wrong", exit_code=3)

        assert exc_info.value.code == 3
        assert "ERR: something wrong" in capsys.readouterr().out
