"""Entrypoint do Sistema.

Demonstra todos os componentes do contrato Sistema usando a Aplicacao.

Uso:
    python -m app
    sistema
"""

from __future__ import annotations

from app.bootstrap import initialize_app
from app.domain import Aplicacao
from app.observability import execution_context
from app.protocols import Sistema
from config.logging import get_logger

logger = get_logger(__name__)


def run() -> None:
    """Executa a demonstração na ordem fixa do contrato."""
    app = Aplicacao()
    app.iniciar()
    app.log("Sistema funcionando")
    Sistema.verificar_versao()


def main() -> None:
    """Inicializa o bootstrap e executa a demonstração."""
    initialize_app()
    with execution_context():
        logger.debug("execution_started", extra={"component": "entrypoint"})
        run()
        logger.debug("execution_finished", extra={"component": "entrypoint"})


if __name__ == "__main__":
    main()
