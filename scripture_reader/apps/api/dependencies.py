"""Shared FastAPI dependencies for service access."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from scripture_reader.services import ContentResolver, ServiceContainer, runtime


def get_service_container() -> ServiceContainer:
    """Resolve the globally configured service container."""
    try:
        return runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc


def get_content_resolver(
    container: Annotated[ServiceContainer, Depends(get_service_container)],
) -> ContentResolver:
    """Return the content resolver bound to the active container."""
    return container.content


__all__ = ["get_content_resolver", "get_service_container"]
