"""Exceções do projeto Sistema."""

from __future__ import annotations


class SistemaError(RuntimeError):
    """Base para falhas do projeto."""


class ConfiguracaoInvalidaError(SistemaError):
    """Settings inválidas em ambiente estrito (staging/production)."""


class ConstanteImutavelError(AttributeError):
    """Tentativa de reatribuir, remover ou sombrear constante de contrato."""

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"{owner}.{name} é constante e não pode ser alterada")
        self.owner = owner
        self.name = name
