"""Filter que carimba cada record com o serviço e a execução corrente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ExecutionContextFilter(logging.Filter):
    """Adiciona ``service`` e ``execution_id`` ao record; nunca descarta.

    Sem ``execution_id_getter`` (logs fora do entry point), o campo fica vazio.
    """

    def __init__(
        self,
        service_name: str,
        execution_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.execution_id_getter = execution_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        getter = self.execution_id_getter
        record.service = self.service_name
        record.execution_id = getter() if getter else ""
        return True
