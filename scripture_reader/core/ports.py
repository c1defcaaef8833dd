"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ResourceDirPort(Protocol):
    """Port resolving the read-only resource directory of a packaged install."""

    def resource_dir(self) -> Path:
        """Return the packaged application's resource directory.

        Implementations raise ``OSError`` when the directory cannot be determined.
        """
        ...


__all__ = ["ResourceDirPort"]
