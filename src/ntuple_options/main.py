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

import argparse
import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ntuple_options._common import exit_with_err_msg
from ntuple_options.cmds import check_cmd_args, show_defaults_cmd_args

from ._version import version

if TYPE_CHECKING:
    from argparse import ArgumentParser, _SubParsersAction


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None):
    arg_parser = argparse.ArgumentParser(
        description="Inspect and validate the ntuple write/read options",
    )

    def missing_subcmd(_):
        print("Please specify subcommand.")
        print(arg_parser.format_help())

    arg_parser.set_defaults(handler=missing_subcmd)

    # ------ top-level parser ------ #
    arg_parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging for this script",
    )

    sub_arg_parser: _SubParsersAction[ArgumentParser] = arg_parser.add_subparsers(
        title="available sub-commands",
        parser_class=functools.partial(
            argparse.ArgumentParser,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        ),  # type: ignore
    )

    # ------ sub commands registering ------ #

    version_cmd = sub_arg_parser.add_parser(
        name="version",
        help="Print the version string of ntuple-options.",
    )
    version_cmd.set_defaults(handler=lambda _: print(f"v{version}"))

    show_defaults_cmd_args(sub_arg_parser)
    check_cmd_args(sub_arg_parser)

    # ------ top-level args parsing ----- #
    args = arg_parser.parse_args(argv)
    if args.debug:
        _root_logger = logging.getLogger("ntuple_options")
        _root_logger.setLevel(logging.DEBUG)
        _root_logger.debug("set to debug logging")

    # ------ execute command ------ #
    handler: Callable = args.handler
    try:
        handler(args)
    except Exception as e:
        logger.exception(f"failed during processing: {e!r}")
        exit_with_err_msg("Exit on failure occurs.")
