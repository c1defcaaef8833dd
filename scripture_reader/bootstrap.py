"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from scripture_reader.adapters.resources import PackageResourceDir
from scripture_reader.core.config import Settings, settings
from scripture_reader.services import (
    ContentRootConfig,
    ContentRootLocator,
    ContentResolver,
    ExecutionMode,
    ServiceContainer,
    build_default_services,
)


def content_root_config(app_settings: Settings = settings) -> ContentRootConfig:
    """Translate settings into the resolver's injected root configuration."""

    return ContentRootConfig(
        mode=ExecutionMode(app_settings.SCRIPTURE_EXECUTION_MODE),
        dev_dir=Path(app_settings.SCRIPTURE_DEV_CONTENT_DIR),
        content_subdir=app_settings.SCRIPTURE_CONTENT_SUBDIR,
    )


def build_default_service_container(
    app_settings: Settings = settings,
    content_root: Optional[Path] = None,
) -> ServiceContainer:
    """Return the default service container.

    ``content_root`` pins the resolver to an explicit directory, bypassing
    execution-mode resolution.
    """

    if content_root is not None:
        return ServiceContainer(content=ContentResolver(ContentRootLocator.fixed(content_root)))
    return build_default_services(
        root_config=content_root_config(app_settings),
        resource_port=PackageResourceDir(app_settings.SCRIPTURE_RESOURCE_DIR),
    )


__all__ = ["build_default_service_container", "content_root_config"]
