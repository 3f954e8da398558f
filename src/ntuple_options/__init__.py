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
"""User-tunable settings for writing and reading ntuples."""

from ._compression import (
    CompressionAlgorithm,
    CompressionDefaults,
    CompressionLevel,
    compression_settings,
)
from ._errors import InvalidWriteOptionsError, OptionsError, OptionsFileError
from ._loader import LoadedOptions, load_options, parse_options
from ._read_options import ClusterCache, ReadOptions
from ._version import version
from ._write_options import AnyWriteOptions, WriteOptions, WriteOptionsDaos

__all__ = [
    "AnyWriteOptions",
    "ClusterCache",
    "CompressionAlgorithm",
    "CompressionDefaults",
    "CompressionLevel",
    "InvalidWriteOptionsError",
    "LoadedOptions",
    "OptionsError",
    "OptionsFileError",
    "ReadOptions",
    "WriteOptions",
    "WriteOptionsDaos",
    "compression_settings",
    "load_options",
    "parse_options",
    "version",
]
