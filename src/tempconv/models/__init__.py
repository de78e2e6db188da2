from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.conversion import (
    ConversionDirection,
    ConversionRequest,
    ConversionResult,
    TemperatureUnit,
)
from tempconv.models.history import HISTORY_LOG_ADAPTER, HistoryRecord

__all__ = [
    # config
    "AppSettings",
    # conversion
    "ConversionDirection",
    "ConversionRequest",
    "ConversionResult",
    "TemperatureUnit",
    # history
    "HISTORY_LOG_ADAPTER",
    "HistoryRecord",
]
