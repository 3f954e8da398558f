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
from pathlib import Path
from typing import TYPE_CHECKING

from ntuple_options._common import exit_with_err_msg, human_readable_size
from ntuple_options._errors import OptionsError
from ntuple_options._loader import LoadedOptions, load_options

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction


logger = logging.getLogger(__name__)

_size_fields = frozenset(
    {
        "approx_zipped_cluster_size",
        "max_unzipped_cluster_size",
        "approx_unzipped_page_size",
        "max_cage_size",
    }
)


def format_options(options: LoadedOptions) -> str:
    """Format the effective options, with sizes in human readable form."""
    lines = []
    for _section, _options in options._asdict().items():
        lines.append(f"{_section}:")
        for k, v in _options.model_dump().items():
            if k in _size_fields:
                v = f"{v} ({human_readable_size(v)})"
            lines.append(f"  {k}: {v}")
    return "\n".join(lines)


def check_cmd_args(
    sub_arg_parser: _SubParsersAction[ArgumentParser], *parent_parser: ArgumentParser
) -> None:
    check_cmd_arg_parser = sub_arg_parser.add_parser(
        name="check",
        help=(
            _help_txt := "Load and validate an options file, print the effective options"
        ),
        description=_help_txt,
        parents=parent_parser,
    )
    check_cmd_arg_parser.add_argument(
        "options_file",
        help="The yaml options file to check.",
    )
    check_cmd_arg_parser.set_defaults(handler=check_cmd)


def check_cmd(args: Namespace) -> None:
    logger.debug(f"calling {check_cmd.__name__} with {args}")
    options_file = Path(args.options_file)

    try:
        _loaded = load_options(options_file)
        finalized = LoadedOptions(
            write=_loaded.write.finalize(),
            read=_loaded.read.finalize(),
        )
    except OptionsError as e:
        logger.debug(f"invalid options file: {e}", exc_info=e)
        exit_with_err_msg(f"{options_file} is not a valid options file: {e}")

    print(format_options(finalized))
    logger.info(f"{options_file} is a valid options file")
