"""Observabilidade — contexto de execução injetado nos logs.

Uso:
    from app.observability import execution_context, get_execution_id
"""

from app.observability.execution import (
    execution_context,
    get_execution_id,
    reset_execution_id,
    set_execution_id,
)

__all__ = [
    "execution_context",
    "get_execution_id",
    "reset_execution_id",
    "set_execution_id",
]
