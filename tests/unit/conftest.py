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
"""Pytest configuration for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_DAOS_OPTIONS = """\
write:
  backend: daos
  compression: 404
  approx_zipped_cluster_size: 100MB
  max_unzipped_cluster_size: 256MiB
  approx_unzipped_page_size: 128KiB
  use_buffered_write: false
  has_small_clusters: true
  object_class: RP_XSF
  max_cage_size: 0
read:
  cluster_cache: off
  cluster_bunch_size: 4
"""


@pytest.fixture
def sample_daos_options() -> str:
    """Sample options file content with daos backend write options."""
    return SAMPLE_DAOS_OPTIONS


@pytest.fixture
def write_options_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write the given content into an options file under tmp_path."""

    def _write(content: str) -> Path:
        _options_f = tmp_path / "options.yaml"
        _options_f.write_text(content)
        return _options_f

    return _write
