"""Domínio — implementações concretas dos contratos."""

from app.domain.aplicacao import Aplicacao

__all__ = [
    "Aplicacao",
]
