"""Aplicacao — implementação concreta do contrato Sistema."""

from __future__ import annotations

import logging

from app.protocols.sistema import Sistema

logger = logging.getLogger(__name__)


class Aplicacao(Sistema):
    """Implementação mínima: fornece apenas ``iniciar``.

    Não guarda estado; herda ``log`` e ``VERSAO`` do contrato.
    """

    def iniciar(self) -> None:
        """Anuncia o início e registra via ``log`` padrão do contrato."""
        print("Aplicação iniciada!")
        logger.debug("Aplicação iniciada", extra={"versao": self.VERSAO})
        self.log("Sistema iniciado")
