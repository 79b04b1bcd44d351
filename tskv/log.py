# Copyright 2026 Hathor Labs
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

from collections import OrderedDict
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.typing import EventDict
from typing_extensions import assert_never

if TYPE_CHECKING:
    from tskv.conf.settings import TskvSettings


class LoggingOutput(str, Enum):
    NULL = 'null'
    PRETTY = 'pretty'
    JSON = 'json'


def _kwargs_formatter(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
    if event_dict and event_dict.get('event') and isinstance(event_dict['event'], str):
        try:
            event_dict['event'] = event_dict['event'].format(**event_dict)
        except (KeyError, IndexError):
            # The event string may contain '{}'s that are not used for formatting, in this case we don't format it.
            pass
    return event_dict


def setup_logging(*, logging_output: LoggingOutput, debug: bool = False) -> None:
    """ Route structlog loggers through the stdlib logging module, rendering with the given output.

    Call it once at startup, before creating any logger with `logger.new()`.
    """
    import logging.config

    # common timestamper for structlog loggers and foreign (stdlib) loggers
    timestamper = structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S')

    # processors for foreign loggers
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    match logging_output:
        case LoggingOutput.NULL:
            handlers = ['null']
        case LoggingOutput.PRETTY:
            handlers = ['pretty']
        case LoggingOutput.JSON:
            handlers = ['json']
        case _:
            assert_never(logging_output)

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'colored': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.dev.ConsoleRenderer(colors=True),
                'foreign_pre_chain': pre_chain,
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.processors.JSONRenderer(),
                'foreign_pre_chain': pre_chain,
            },
        },
        'handlers': {
            'pretty': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'formatter': 'colored',
            },
            'json': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'formatter': 'json',
            },
            'null': {
                'class': 'logging.NullHandler',
            },
        },
        'loggers': {
            '': {
                'handlers': handlers,
                'level': 'DEBUG' if debug else 'INFO',
            },
        },
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _kwargs_formatter,
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

    structlog.get_logger().debug('logging configured', output=logging_output.value)


def setup_logging_from_settings(settings: Optional['TskvSettings'] = None) -> None:
    """Set up logging with the output and level of the settings, the global settings are used when none are given."""
    if settings is None:
        from tskv.conf.get_settings import get_global_settings
        settings = get_global_settings()

    setup_logging(logging_output=settings.LOG_OUTPUT, debug=settings.LOG_DEBUG)
