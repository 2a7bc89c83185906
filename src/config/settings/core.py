"""Settings do Sistema.

Configurações de execução lidas de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "sistema"
DEFAULT_LOG_LEVEL = "INFO"
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class SistemaSettings:
    """Configurações de execução do Sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço injetado nos logs
        log_level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Modo debug ativo (força nível DEBUG)
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    debug: bool = False

    @property
    def is_strict(self) -> bool:
        """Retorna True se erros de configuração devem bloquear a execução."""
        return self.environment in ("staging", "production")

    @property
    def effective_log_level(self) -> str:
        """Nível de log efetivo, considerando o modo debug."""
        return "DEBUG" if self.debug else self.log_level.upper()

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_from_env() -> SistemaSettings:
    """Carrega SistemaSettings de variáveis de ambiente."""
    return SistemaSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_settings() -> SistemaSettings:
    """Retorna instância cacheada de SistemaSettings."""
    return _load_from_env()
