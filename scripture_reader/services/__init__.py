"""Application service layer: content queries and their wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scripture_reader.core.ports import ResourceDirPort

from .content import ContentResolver
from .content_root import ContentRootConfig, ContentRootLocator, ExecutionMode


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    content: ContentResolver


def build_default_services(
    *,
    root_config: Optional[ContentRootConfig] = None,
    resource_port: Optional[ResourceDirPort] = None,
) -> ServiceContainer:
    """Return a service container resolving content per ``root_config``."""

    locator = ContentRootLocator(root_config or ContentRootConfig(), resource_port)
    return ServiceContainer(content=ContentResolver(locator))


__all__ = [
    "ContentResolver",
    "ContentRootConfig",
    "ContentRootLocator",
    "ExecutionMode",
    "ServiceContainer",
    "build_default_services",
]
