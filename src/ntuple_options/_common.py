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

from __future__ import annotations

import logging
import re
import sys
from typing import Literal, NoReturn

_MultiUnits = Literal["GiB", "MiB", "KiB", "Bytes", "KB", "MB", "GB"]
# fmt: off
_multiplier: dict[_MultiUnits, int] = {
    "GiB": 1024 ** 3, "MiB": 1024 ** 2, "KiB": 1024 ** 1,
    "GB": 1000 ** 3, "MB": 1000 ** 2, "KB": 1000 ** 1,
    "Bytes": 1,
}
# fmt: on
_multiplier_lookup = {_k.lower(): _v for _k, _v in _multiplier.items()}
_multiplier_lookup["b"] = 1
_binary_units: tuple[_MultiUnits, ...] = ("GiB", "MiB", "KiB")

_SIZE_PA = re.compile(r"^\s*(?P<num>\d+)\s*(?P<unit>[A-Za-z]+)?\s*$")


def human_readable_size(_in: int) -> str:
    # NOTE: only binary units are used for display
    for _mu_name in _binary_units:
        _mu = _multiplier[_mu_name]
        if (_res := (_in / _mu)) > 1:
            return f"{_res:.2f} {_mu_name}"
    return f"{_in} Bytes"


def parse_size(_in: int | str) -> int:
    """Parse a size given either as int or as string with unit, like `64KiB` or `50 MB`.

    Raises:
        ValueError if the input cannot be parsed.
    """
    if isinstance(_in, bool):
        raise ValueError(f"invalid size: {_in!r}")
    if isinstance(_in, int):
        return _in

    if not (ma := _SIZE_PA.match(_in)):
        raise ValueError(f"invalid size: {_in!r}")

    _unit = ma.group("unit")
    if _unit is None:
        return int(ma.group("num"))
    if (_mu := _multiplier_lookup.get(_unit.lower())) is None:
        raise ValueError(f"unknown size unit {_unit!r} in {_in!r}")
    return int(ma.group("num")) * _mu


def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s]-%(funcName)s:%(lineno)d,%(message)s",
    )
    _root_logger = logging.getLogger()
    # mute loggings from third-party packages
    _root_logger.setLevel(logging.CRITICAL)

    _options_logger = logging.getLogger("ntuple_options")
    _options_logger.setLevel(logging.INFO)


def exit_with_err_msg(err_msg: str, exit_code: int = 1) -> NoReturn:
    print(f"ERR: {err_msg}")
    sys.exit(exit_code)
