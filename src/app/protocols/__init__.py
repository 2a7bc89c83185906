"""Protocolos e contratos do Sistema."""

from .sistema import Sistema

__all__ = [
    "Sistema",
]
