# SPDX-License-Identifier: MIT
"""Detector configuration loader and schema.

Scan window sizes default to the values the heuristics were tuned for. They
can be overridden from a YAML file, located either explicitly or through the
``DOC_PROTECTION_CONFIG`` environment variable.

Usage:
    from doc_protection.config import load_detector_config

    config = load_detector_config("detector.yaml")
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "DOC_PROTECTION_CONFIG"


class ScanWindows(BaseModel):
    """Byte windows read by each scanner."""

    doc_header: int = Field(default=512, description="Legacy Word header read for the FIB flag")
    xls: int = Field(default=1024, description="Legacy Excel window searched for FilePass")
    ppt: int = Field(default=512, description="Legacy PowerPoint window searched for FilePass")
    pdf: int = Field(default=8192, description="PDF prefix searched for an /Encrypt reference")

    @field_validator("doc_header", "xls", "ppt", "pdf")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("scan window must be a positive byte count")
        return v


class DetectorConfig(BaseModel):
    """Full detector configuration."""

    version: str = Field(default="1.0")
    windows: ScanWindows = Field(default_factory=ScanWindows)


def load_detector_config(config_path: Path | str | None = None) -> DetectorConfig:
    """Load detector configuration.

    Args:
        config_path: YAML file path. If None, ``DOC_PROTECTION_CONFIG`` is
            consulted; without it the defaults are returned.

    Returns:
        DetectorConfig: validated configuration

    Raises:
        FileNotFoundError: the configuration file does not exist
        pydantic.ValidationError: a value is out of range
    """
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            return DetectorConfig()
        config_path = env_path

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        raw_config = {}

    logger.debug(f"Loaded detector config: {config_path}")
    return DetectorConfig(**raw_config)


_cached_config: DetectorConfig | None = None


def get_detector_config(reload: bool = False) -> DetectorConfig:
    """Return the cached default configuration.

    Args:
        reload: Re-read the configuration source
    """
    global _cached_config  # noqa: PLW0603

    if _cached_config is None or reload:
        _cached_config = load_detector_config()

    return _cached_config


__all__ = [
    "CONFIG_ENV_VAR",
    "DetectorConfig",
    "ScanWindows",
    "get_detector_config",
    "load_detector_config",
]
