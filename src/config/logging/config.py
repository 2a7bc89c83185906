"""Configuração centralizada de logging.

Os logs vão para stderr em JSON; stdout fica reservado à saída do Sistema.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="sistema")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import ExecutionContextFilter
from config.logging.formatters import create_json_formatter
from config.settings import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    execution_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez, pelo bootstrap.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        execution_id_getter: Função opcional que retorna o execution_id
            do contexto atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ExecutionContextFilter(service_name, execution_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
