"""Testes para config.logging.

Cobre: configure_logging, get_logger, ExecutionContextFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    ExecutionContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)


def _record(msg: str = "Operação OK", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.teste",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_nivel_padrao_info(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_nivel_case_insensitive(self) -> None:
        """Aceita nível em minúsculas."""
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.parametrize("level", ["DEBUG", "ERROR", "CRITICAL"])
    def test_niveis_validos(self, level: str) -> None:
        """Todos os níveis válidos são aceitos."""
        configure_logging(level=level)
        assert logging.getLogger().level == getattr(logging, level)

    def test_nivel_invalido_levanta(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_substitui_handlers(self) -> None:
        """Handlers existentes são substituídos por um único."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_escreve_json_em_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Logs vão para stderr, em JSON, com service e execution_id."""
        configure_logging(
            level="DEBUG",
            service_name="sistema_teste",
            execution_id_getter=lambda: "exec-42",
        )
        get_logger("app.teste").debug("Versão verificada")

        captured = capsys.readouterr()
        assert captured.out == ""
        payload = json.loads(captured.err.strip())
        assert payload["message"] == "Versão verificada"
        assert payload["service"] == "sistema_teste"
        assert payload["execution_id"] == "exec-42"
        assert payload["level"] == "DEBUG"


class TestGetLogger:
    """Testes para get_logger."""

    def test_retorna_logger(self) -> None:
        """Retorna logger com o nome especificado."""
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_mesmo_nome_mesma_instancia(self) -> None:
        """Mesmo nome retorna mesma instância."""
        assert get_logger("same.module") is get_logger("same.module")


class TestExecutionContextFilter:
    """Testes para ExecutionContextFilter."""

    def test_injeta_campos(self) -> None:
        """Adiciona service e execution_id do getter."""
        record = _record()
        assert ExecutionContextFilter("sistema", lambda: "exec-1").filter(record)
        assert record.service == "sistema"  # type: ignore[attr-defined]
        assert record.execution_id == "exec-1"  # type: ignore[attr-defined]

    def test_sem_getter_usa_vazio(self) -> None:
        """Sem getter, execution_id é string vazia."""
        record = _record()
        ExecutionContextFilter("sistema").filter(record)
        assert record.execution_id == ""  # type: ignore[attr-defined]

    def test_getter_consultado_a_cada_record(self) -> None:
        """O execution_id reflete o contexto no momento do log."""
        ids = iter(["exec-1", "exec-2"])
        filtro = ExecutionContextFilter("sistema", lambda: next(ids))
        primeiro, segundo = _record(), _record()
        filtro.filter(primeiro)
        filtro.filter(segundo)
        assert primeiro.execution_id == "exec-1"  # type: ignore[attr-defined]
        assert segundo.execution_id == "exec-2"  # type: ignore[attr-defined]


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_campos_renomeados(self) -> None:
        """Saída usa level e logger no lugar de levelname e name."""
        record = _record(execution_id="exec-1", service="sistema")
        payload = json.loads(create_json_formatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.teste"
        assert payload["message"] == "Operação OK"
        assert "levelname" not in payload
        assert "name" not in payload

    def test_campos_obrigatorios_presentes(self) -> None:
        """Todos os campos obrigatórios aparecem (com renomeação)."""
        record = _record(execution_id="exec-1", service="sistema")
        payload = json.loads(create_json_formatter().format(record))
        esperados = {FIELD_RENAME_MAP.get(f, f) for f in REQUIRED_LOG_FIELDS}
        assert esperados <= payload.keys()
