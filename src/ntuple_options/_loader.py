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
"""Load ntuple options from yaml options file.

An options file looks like the following, both sections are optional:

```yaml
write:
  backend: daos
  approx_unzipped_page_size: 128KiB
  object_class: RP_XSF
read:
  cluster_cache: off
```
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NamedTuple

import yaml
from pydantic import TypeAdapter, ValidationError

from ._errors import OptionsFileError
from ._read_options import ReadOptions
from ._write_options import AnyWriteOptions, WriteOptions

logger = logging.getLogger(__name__)

WRITE_SECTION = "write"
READ_SECTION = "read"

_write_options_adapter: TypeAdapter[WriteOptions] = TypeAdapter(AnyWriteOptions)


class LoadedOptions(NamedTuple):
    write: WriteOptions
    read: ReadOptions


def parse_options(_loaded: dict[str, Any]) -> LoadedOptions:
    """Validate the loaded options dict and compose the options from it."""
    unknown = set(_loaded) - {WRITE_SECTION, READ_SECTION}
    if unknown:
        raise OptionsFileError(
            f"unknown sections in options: {sorted(unknown, key=str)}"
        )

    _sections: dict[str, dict[str, Any]] = {}
    for _section in (WRITE_SECTION, READ_SECTION):
        # NOTE: only an empty section means all default
        if (_raw := _loaded.get(_section)) is None:
            _raw = {}
        if not isinstance(_raw, dict):
            raise OptionsFileError(f"section `{_section}` must be a mapping")
        _sections[_section] = _raw

    _write_raw = {"backend": "common", **_sections[WRITE_SECTION]}
    try:
        write_options = _write_options_adapter.validate_python(_write_raw)
        read_options = ReadOptions.model_validate(_sections[READ_SECTION])
    except ValidationError as e:
        logger.debug(f"invalid options: {e}", exc_info=e)
        raise OptionsFileError(f"invalid options: {e}") from e
    return LoadedOptions(write=write_options, read=read_options)


def load_options(options_file: Path) -> LoadedOptions:
    """Load and validate the options from <options_file>.

    Raises:
        OptionsFileError if the file is not found, or not a valid options file.
    """
    if not options_file.is_file():
        raise OptionsFileError(f"options file {options_file} does not exist")

    try:
        _loaded = yaml.safe_load(options_file.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise OptionsFileError(
            f"options file {options_file} is not a valid yaml file: {e}"
        ) from e

    # an empty file means all default
    if _loaded is None:
        _loaded = {}
    if not isinstance(_loaded, dict):
        raise OptionsFileError(
            f"options file {options_file} is not a valid options file, expecting a plain dict"
        )
    return parse_options(_loaded)
