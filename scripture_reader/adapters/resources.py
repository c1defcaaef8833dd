"""Packaged resource directory adapter implementing ``ResourceDirPort``."""

from __future__ import annotations

from pathlib import Path

from scripture_reader.core.ports import ResourceDirPort

# Installed layout: <site-packages>/scripture_reader/adapters/resources.py
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class PackageResourceDir(ResourceDirPort):
    """Resolve the resource directory of an installed build.

    An explicit ``override`` wins; otherwise content ships as package data
    beside the ``scripture_reader`` package.
    """

    def __init__(self, override: Path | None = None) -> None:
        self._override = override

    def resource_dir(self) -> Path:
        if self._override is not None:
            return Path(self._override).expanduser().resolve()
        return PACKAGE_DIR


__all__ = ["PackageResourceDir", "PACKAGE_DIR"]
