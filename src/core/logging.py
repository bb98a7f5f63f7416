"""Structured logging на structlog поверх stdlib logging.

Библиотечный код молчит, пока приложение не вызовет configure_logging():
- логгеры модулей — stdlib логгеры из дерева "src", обёрнутые structlog
- на корне "src" висит только NullHandler, уровень stdlib по умолчанию WARNING
- debug/info события реестра без конфигурации никуда не пишутся

configure_logging() вешает на "src" свой StreamHandler с рендером
JSON / console из Settings.log_format.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from src.core.settings import Settings, get_settings

PACKAGE_LOGGER = "src"
_HANDLER_NAME = "vat-register"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    settings: Optional[Settings] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Подключение вывода логов реестра.

    Повторный вызов заменяет ранее установленный handler, а не добавляет второй.

    Args:
        settings: Настройки (по умолчанию get_settings())
        stream: Поток вывода (по умолчанию sys.stdout)

    Returns:
        Установленный handler
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)

    return handler


def get_logger(name: str):
    """structlog логгер поверх stdlib логгера name.

    Процессоры берутся из текущей конфигурации structlog в момент вызова,
    фильтрация по уровню и вывод — на стороне stdlib.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
