"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfiguracaoInvalidaError,
    ConstanteImutavelError,
    SistemaError,
)

__all__ = [
    "ConfiguracaoInvalidaError",
    "ConstanteImutavelError",
    "SistemaError",
]
