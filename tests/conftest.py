"""Configuração do pytest para o projeto Sistema."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _restaurar_logging():
    """Restaura handlers e nível do root logger após cada teste."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _limpar_settings_cache():
    """Garante que cada teste leia as settings do ambiente atual."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ambiente_limpo(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove variáveis de ambiente lidas pelas settings."""
    for var in ("ENVIRONMENT", "SERVICE_NAME", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
