"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="sistema")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("Versão verificada", extra={"versao": 1})
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import ExecutionContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ExecutionContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
