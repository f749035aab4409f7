"""
Display configuration models and YAML I/O for cashflow-dashboard.

This module defines the Pydantic models that map 1:1 to dashboard.yaml,
plus helpers for loading and saving it.

Key models:
- DisplayConfig: Top-level config (currently just the locale block).
- LocaleConfig: Grouping separator, currency symbol, sign placement and
  the placeholder rendered for unusable values.

Key functions:
- load_config(path) -> DisplayConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

The defaults reproduce the id-ID (Indonesian Rupiah) conventions, so
callers that never touch a config file get ``"Rp 1.234.567"``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from cashflow_dashboard.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class LocaleConfig(BaseModel):
    """Number and currency rendering conventions."""

    locale: str = Field("id-ID", description="Locale tag the conventions follow")
    group_separator: str = Field(
        ".", description="Inserted every three integer digits"
    )
    currency_symbol: str = Field("Rp", description="Prefix for currency values")
    symbol_spacing: str = Field(
        " ", description="Text between the currency symbol and the digits"
    )
    negative_sign: Literal["before_symbol", "after_symbol"] = Field(
        "before_symbol",
        description="'-Rp 5' (before_symbol) or 'Rp -5' (after_symbol)",
    )
    invalid_placeholder: str = Field(
        "-", description="Rendered instead of values that are not numbers"
    )

    @model_validator(mode="after")
    def _check_group_separator(self) -> LocaleConfig:
        """Reject separators that would make the output ambiguous."""
        sep = self.group_separator
        if not sep:
            raise ValueError("group_separator must not be empty.")
        if any(ch.isdigit() or ch in "+-" for ch in sep):
            raise ValueError(
                f"group_separator {sep!r} must not contain digits or signs."
            )
        return self


class DisplayConfig(BaseModel):
    """Top-level configuration for cashflow-dashboard.

    Maps 1:1 to dashboard.yaml.
    """

    locale: LocaleConfig = Field(default_factory=LocaleConfig)


DEFAULT_CONFIG = DisplayConfig()


def load_config(path: str | Path) -> DisplayConfig:
    """Load and validate dashboard.yaml into a DisplayConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return DisplayConfig.model_validate(raw)


def save_config(config: DisplayConfig, path: str | Path) -> None:
    """Serialize a DisplayConfig to YAML with a short header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# cashflow-dashboard display configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
