"""Configuration schema and loading for slngraph."""

from .loader import load_report_config
from .schema import DotConfig, ReportConfig

__all__ = [
    "DotConfig",
    "ReportConfig",
    "load_report_config",
]
