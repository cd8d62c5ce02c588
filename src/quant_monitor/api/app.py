"""FastAPI application factory for the quant-monitor tail API."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quant_monitor import __version__
from quant_monitor.api.routes.tail import router as tail_router
from quant_monitor.storage.recency_buffer import RecencyBuffer


def create_app(buffer: RecencyBuffer) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        buffer: Recency buffer shared with the monitor loop.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="quant-monitor API",
        version=__version__,
        description="Most recent price-signal reports",
    )

    app.state.recency_buffer = buffer

    app.include_router(tail_router)

    @app.exception_handler(RequestValidationError)
    async def bad_request(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
