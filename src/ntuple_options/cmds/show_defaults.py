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
from typing import TYPE_CHECKING

import yaml

from ntuple_options._loader import READ_SECTION, WRITE_SECTION
from ntuple_options._read_options import ReadOptions
from ntuple_options._write_options import WriteOptions, WriteOptionsDaos

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


logger = logging.getLogger(__name__)

_backends: dict[str, type[WriteOptions]] = {
    "common": WriteOptions,
    "daos": WriteOptionsDaos,
}


def dump_default_options(backend: str) -> str:
    """Dump the default write and read options of <backend> as yaml."""
    return yaml.safe_dump(
        {
            WRITE_SECTION: _backends[backend]().model_dump(),
            READ_SECTION: ReadOptions().model_dump(),
        },
        sort_keys=False,
    )


def show_defaults_cmd_args(
    sub_arg_parser: _SubParsersAction[ArgumentParser], *parent_parser: ArgumentParser
) -> None:
    show_defaults_cmd_arg_parser = sub_arg_parser.add_parser(
        name="show-defaults",
        help=(_help_txt := "Print the default options as an options file"),
        description=_help_txt,
        parents=parent_parser,
    )
    show_defaults_cmd_arg_parser.add_argument(
        "--backend",
        choices=list(_backends),
        default="common",
        help="The backend of the write options.",
    )
    show_defaults_cmd_arg_parser.set_defaults(handler=show_defaults_cmd)


def show_defaults_cmd(args: Namespace) -> None:
    logger.debug(f"calling {show_defaults_cmd.__name__} with {args}")
    print(dump_default_options(args.backend), end="")
