"""Content root resolution for development and packaged execution modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from scripture_reader.core.exceptions import ContentRootNotFound
from scripture_reader.core.ports import ResourceDirPort


class ExecutionMode(str, Enum):
    """How the application is being run."""

    DEVELOPMENT = "development"
    PACKAGED = "packaged"


@dataclass(frozen=True, slots=True)
class ContentRootConfig:
    """Injected inputs for locating the content root."""

    mode: ExecutionMode = ExecutionMode.DEVELOPMENT
    dev_dir: Path = Path("..") / "public"
    content_subdir: str = "public"


class ContentRootLocator:
    """Compute and validate the absolute content root.

    Development mode uses ``dev_dir`` relative to the working directory;
    packaged mode joins ``content_subdir`` onto the resource directory
    reported by ``resources``.
    """

    def __init__(
        self,
        root_config: ContentRootConfig,
        resources: Optional[ResourceDirPort] = None,
    ) -> None:
        self._config = root_config
        self._resources = resources

    @classmethod
    def fixed(cls, root: Path) -> "ContentRootLocator":
        """Locator that always resolves to ``root`` (still validated)."""
        return cls(ContentRootConfig(mode=ExecutionMode.DEVELOPMENT, dev_dir=Path(root)))

    def candidate(self) -> Path:
        """Return the absolute root path for the configured mode, unchecked."""
        if self._config.mode is ExecutionMode.DEVELOPMENT:
            return Path(self._config.dev_dir).expanduser().absolute()
        if self._resources is None:
            raise ContentRootNotFound(None, reason="no resource directory provider configured")
        try:
            resource_dir = self._resources.resource_dir()
        except OSError as exc:
            raise ContentRootNotFound(None, reason=str(exc)) from exc
        return Path(resource_dir).absolute() / self._config.content_subdir

    def resolve(self) -> Path:
        """Return the content root, raising ``ContentRootNotFound`` if absent."""
        root = self.candidate()
        if not root.is_dir():
            raise ContentRootNotFound(root)
        return root


__all__ = ["ContentRootConfig", "ContentRootLocator", "ExecutionMode"]
