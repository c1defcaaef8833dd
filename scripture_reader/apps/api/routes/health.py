"""Health and readiness routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Welcome to the Scripture Reader API. See /docs for available endpoints."}


@router.get("/alive")
async def alive_check() -> JSONResponse:
    """Liveness endpoint for infrastructure probes."""
    return JSONResponse({"status": "ok", "message": "Scripture Reader is alive and healthy."})


__all__ = ["router"]
