"""Bootstrap do Sistema — composition root.

Lê as settings, valida e configura o logging estruturado antes de qualquer
operação do contrato.

Uso:
    from app.bootstrap import initialize_app

    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_execution_id
from config.logging import configure_logging
from config.settings import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVICE_NAME,
    SistemaSettings,
    get_settings,
)
from utils.errors import ConfiguracaoInvalidaError

logger = logging.getLogger(__name__)


def initialize_app(settings: SistemaSettings | None = None) -> SistemaSettings:
    """Inicializa o Sistema com as configurações de execução.

    Deve ser chamada uma vez, pelo entry point.

    Args:
        settings: Settings explícitas. Se None, carrega do ambiente.

    Returns:
        Settings efetivamente usadas.

    Raises:
        ConfiguracaoInvalidaError: Settings inválidas em staging/production.
    """
    settings = settings or get_settings()
    errors = validate_runtime_settings(settings)

    level = DEFAULT_LOG_LEVEL if errors else settings.effective_log_level
    configure_logging(
        level=level,
        service_name=settings.service_name or DEFAULT_SERVICE_NAME,
        execution_id_getter=get_execution_id,
    )

    if errors:
        logger.warning(
            "settings_validation_failed",
            extra={
                "component": "bootstrap",
                "environment": settings.environment,
                "error_count": len(errors),
                "errors": errors,
            },
        )
    else:
        logger.debug(
            "settings_validated",
            extra={"component": "bootstrap", "environment": settings.environment},
        )
    return settings


def validate_runtime_settings(settings: SistemaSettings) -> list[str]:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir execução inválida.
    Em `development` devolve os erros para que sejam apenas registrados.
    """
    errors = settings.validate()
    if errors and settings.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfiguracaoInvalidaError(
            f"Configuração inválida para {settings.environment}:\n{details}"
        )
    return errors
