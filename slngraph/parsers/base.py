"""Shared parser errors."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ParseError(ValueError):
    """A solution or project file could not be read or understood.

    Attributes:
        path: File that failed to parse.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)
