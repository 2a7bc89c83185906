"""Contrato Sistema e seus componentes.

Reúne, num único contrato, os cinco componentes de uma interface:

1. método abstrato: ``iniciar`` (obrigatório implementar)
2. constante pública: ``VERSAO`` (compartilhada, somente leitura)
3. método padrão: ``log`` (corpo fornecido pelo contrato)
4. método estático: ``verificar_versao`` (não exige instância)
5. método privado: ``__validar`` (só acessível dentro do contrato)

Uso:
    from app.protocols import Sistema

    class MinhaAplicacao(Sistema):
        def iniciar(self) -> None:
            self.log("pronta")

    Sistema.verificar_versao()
"""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from typing import Any, ClassVar, Final

from utils.errors import ConstanteImutavelError

logger = logging.getLogger(__name__)


class _ContratoMeta(ABCMeta):
    """Metaclasse que congela as constantes declaradas no contrato.

    Constantes são os nomes listados em ``_CONSTANTES`` do contrato, além do
    próprio ``_CONSTANTES``. Não podem ser redeclaradas por subclasses nem
    sobrepostas por mixins, reatribuídas ou removidas.
    """

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> _ContratoMeta:
        for base in bases:
            redeclaradas = _protegidos(base) & namespace.keys()
            if redeclaradas:
                raise ConstanteImutavelError(name, sorted(redeclaradas)[0])
        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        for contrato in cls.__mro__[1:]:
            if not isinstance(contrato, _ContratoMeta):
                continue
            declarados = vars(contrato)
            if "_CONSTANTES" not in declarados:
                continue
            # Um mixin antes do contrato no MRO não pode sombrear o valor
            for constante in sorted(_protegidos(contrato)):
                if getattr(cls, constante) is not declarados[constante]:
                    raise ConstanteImutavelError(name, constante)
        return cls

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in _protegidos(cls):
            raise ConstanteImutavelError(cls.__name__, name)
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in _protegidos(cls):
            raise ConstanteImutavelError(cls.__name__, name)
        super().__delattr__(name)


def _protegidos(cls: type) -> frozenset[str]:
    constantes = getattr(cls, "_CONSTANTES", frozenset())
    return constantes | {"_CONSTANTES"} if constantes else constantes


class Sistema(metaclass=_ContratoMeta):
    """Contrato com todos os componentes de uma interface.

    Implementações devem fornecer ``iniciar``. As demais operações já vêm
    prontas: ``log`` pode ser sobrescrito, ``verificar_versao`` é chamado
    direto na classe e ``__validar`` é interno ao contrato.
    """

    _CONSTANTES: ClassVar[frozenset[str]] = frozenset({"VERSAO"})

    VERSAO: Final = 1

    @abstractmethod
    def iniciar(self) -> None:
        """Executa a lógica de inicialização da implementação."""

    def log(self, mensagem: str) -> None:
        """Valida o sistema e imprime ``[Log] <mensagem>``."""
        self.__validar()
        print(f"[Log] {mensagem}")
        logger.debug(
            "Log emitido",
            extra={"component": type(self).__name__, "mensagem_len": len(mensagem)},
        )

    @staticmethod
    def verificar_versao() -> None:
        """Imprime a versão do contrato. Não exige instância."""
        print(f"Versão do sistema: {Sistema.VERSAO}")
        logger.debug("Versão verificada", extra={"versao": Sistema.VERSAO})

    def __validar(self) -> bool:
        # Name mangling: vira _Sistema__validar, invisível a implementações
        print("Validando sistema...")
        logger.debug("Sistema validado", extra={"component": type(self).__name__})
        return True

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _protegidos(type(self)):
            raise ConstanteImutavelError(type(self).__name__, name)
        super().__setattr__(name, value)
