"""Identificador da execução corrente.

O execution_id é injetado em todos os logs de uma execução do entry point.
Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import execution_context, get_execution_id

    with execution_context() as execution_id:
        ...  # logs carregam execution_id
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_execution_id: ContextVar[str] = ContextVar("execution_id", default="")


def get_execution_id() -> str:
    """Retorna o execution_id do contexto atual (string vazia se ausente)."""
    return _execution_id.get()


def set_execution_id(execution_id: str | None = None) -> Token[str]:
    """Define o execution_id no contexto atual.

    Args:
        execution_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_execution_id().
    """
    return _execution_id.set(execution_id or str(uuid.uuid4()))


def reset_execution_id(token: Token[str]) -> None:
    """Restaura o execution_id ao valor anterior."""
    _execution_id.reset(token)


@contextmanager
def execution_context(execution_id: str | None = None) -> Iterator[str]:
    """Abre um contexto de execução e o fecha ao sair."""
    token = set_execution_id(execution_id)
    try:
        yield get_execution_id()
    finally:
        reset_execution_id(token)
