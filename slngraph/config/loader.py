"""Helpers for loading report configuration from TOML/JSON sources.

`load_report_config` accepts:

* None -> default ReportConfig
* dict -> ReportConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .schema import ReportConfig

logger = logging.getLogger("slngraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

_CONFIG_SUFFIXES = {".toml", ".tml", ".json"}


def _guess_format(text: str) -> str:
    return "json" if text.lstrip().startswith(("{", "[")) else "toml"


def load_report_config(source: ConfigSource) -> ReportConfig:
    """Load ReportConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns ReportConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        ReportConfig instance.

    Raises:
        FileNotFoundError: A .toml/.json path was given but does not exist.
        ValueError: The source does not decode to a mapping.
        TypeError: Unsupported source type.
        pydantic.ValidationError: Values fail validation.
    """
    if source is None:
        logger.debug("No config source provided; using default ReportConfig")
        return ReportConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading ReportConfig from provided dict")
        return ReportConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        inline = isinstance(source, str) and (
            "\n" in source or source.lstrip().startswith(("{", "["))
        )

        if not inline and not path.is_file() and path.suffix.lower() in _CONFIG_SUFFIXES:
            raise FileNotFoundError(f"Configuration file not found: {path}")

        if not inline and path.is_file():
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        try:
            data = json.loads(text) if fmt == "json" else tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            raise ValueError(f"Invalid {fmt.upper()} configuration: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return ReportConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_report_config"]
