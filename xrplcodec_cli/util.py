# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import json
import sys
from argparse import ArgumentParser
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, NamedTuple, Optional

import configargparse
import structlog
from typing_extensions import assert_never

LOG_TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def create_parser(*, prefix: Optional[str] = None, add_help: bool = True) -> ArgumentParser:
    """Argument parser whose long options can also be set through `XRPLCODEC_*` env vars."""
    return configargparse.ArgumentParser(auto_env_var_prefix=prefix or 'xrplcodec_', add_help=add_help)


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingOptions(NamedTuple):
    debug: bool


def process_logging_output(argv: list[str]) -> LoggingOutput:
    """Extract logging output before argv parsing."""
    parser = create_parser(add_help=False)

    log_args = parser.add_mutually_exclusive_group()
    log_args.add_argument('--json-logs', action='store_true')
    log_args.add_argument('--disable-logs', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    if args.json_logs:
        return LoggingOutput.JSON

    if args.disable_logs:
        return LoggingOutput.NULL

    return LoggingOutput.PRETTY


def process_logging_options(argv: list[str]) -> LoggingOptions:
    """Extract logging-specific options that are processed before argv parsing."""
    parser = create_parser(add_help=False)
    parser.add_argument('--debug', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    return LoggingOptions(debug=args.debug)


def _console_renderer() -> structlog.dev.ConsoleRenderer:
    if not sys.stderr.isatty():
        return structlog.dev.ConsoleRenderer(colors=False)

    from colorama import Fore, Style
    return structlog.dev.ConsoleRenderer(colors=True, level_styles={
        'critical': Style.BRIGHT + Fore.RED,
        'exception': Fore.RED,
        'error': Fore.RED,
        'warn': Fore.YELLOW,
        'warning': Fore.YELLOW,
        'info': Fore.GREEN,
        'debug': Style.BRIGHT + Fore.CYAN,
        'notset': Fore.RED,
    })


def setup_logging(*, logging_output: LoggingOutput, logging_options: LoggingOptions) -> None:
    """ Route structlog through the stdlib logging module, log lines go to stderr.

    Command results are printed to stdout so they can be piped regardless of the logging output.
    """
    import logging.config

    timestamper = structlog.processors.TimeStamper(fmt=LOG_TIMESTAMP_FORMAT)

    # applied to records of stdlib loggers before rendering
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    renderer: Any
    match logging_output:
        case LoggingOutput.NULL:
            renderer = None
        case LoggingOutput.PRETTY:
            renderer = _console_renderer()
        case LoggingOutput.JSON:
            renderer = structlog.processors.JSONRenderer()
        case _:
            assert_never(logging_output)

    formatters: dict[str, Any] = {}
    handler: dict[str, Any] = {'class': 'logging.NullHandler'}
    if renderer is not None:
        formatters['structlog'] = {
            '()': structlog.stdlib.ProcessorFormatter,
            'processor': renderer,
            'foreign_pre_chain': pre_chain,
        }
        handler = {
            'class': 'logging.StreamHandler',
            'formatter': 'structlog',
            'stream': 'ext://sys.stderr',
        }

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': {'default': handler},
        'loggers': {
            '': {
                'handlers': ['default'],
                'level': 'DEBUG' if logging_options.debug else 'INFO',
            },
        },
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def read_input(value: Optional[str]) -> str:
    """Return the given argument, or the whole of stdin when the argument is missing or `-`."""
    if value is None or value == '-':
        return sys.stdin.read().strip()
    return value


def read_json_input(value: Optional[str]) -> Any:
    """Parse the input as JSON, exits printing the error when it is not valid JSON."""
    try:
        return json.loads(read_input(value))
    except json.JSONDecodeError as e:
        print('Error: invalid JSON: {}'.format(e), file=sys.stderr)
        sys.exit(2)


def print_json(value: Any) -> None:
    print(json.dumps(value, indent=2))
