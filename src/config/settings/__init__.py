"""Settings do Sistema.

Re-exporta a dataclass de configuração e o loader cacheado.
"""

from __future__ import annotations

from config.settings.core import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVICE_NAME,
    VALID_LOG_LEVELS,
    Environment,
    SistemaSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SERVICE_NAME",
    "VALID_LOG_LEVELS",
    "Environment",
    "SistemaSettings",
    "get_settings",
]
