import logging
import os
from dataclasses import dataclass

from .logging import LOG_FORMATS, resolve_log_level
from .models import WEIGHT_UNITS


@dataclass(frozen=True)
class Config:
    weight_unit: str = "pounds"
    bar_weight: float | None = None
    log_format: str = "json"
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls) -> "Config":
        weight_unit = os.environ.get("FTO_WEIGHT_UNIT", "pounds").strip().lower()
        if weight_unit not in WEIGHT_UNITS:
            raise RuntimeError(f"FTO_WEIGHT_UNIT must be one of: {', '.join(WEIGHT_UNITS)}")

        raw_bar = os.environ.get("FTO_BAR_WEIGHT", "").strip()
        try:
            bar_weight = float(raw_bar) if raw_bar else None
        except ValueError:
            raise RuntimeError(f"FTO_BAR_WEIGHT must be a number, got {raw_bar!r}") from None
        if bar_weight is not None and bar_weight <= 0:
            raise RuntimeError("FTO_BAR_WEIGHT must be positive")

        log_format = os.environ.get("FTO_LOG_FORMAT", "json").strip().lower()
        if log_format not in LOG_FORMATS:
            raise RuntimeError(f"FTO_LOG_FORMAT must be one of: {', '.join(LOG_FORMATS)}")

        level_name = os.environ.get("FTO_LOG_LEVEL", "INFO")
        try:
            log_level = resolve_log_level(level_name)
        except ValueError:
            raise RuntimeError(f"FTO_LOG_LEVEL is not a logging level: {level_name.strip().upper()}") from None

        return cls(
            weight_unit=weight_unit,
            bar_weight=bar_weight,
            log_format=log_format,
            log_level=log_level,
        )
