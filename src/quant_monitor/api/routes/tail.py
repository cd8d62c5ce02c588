"""Tail endpoint: drain the most recent reports from the recency buffer."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, Request

from quant_monitor.storage.recency_buffer import RecencyBuffer

router = APIRouter(tags=["tail"])


def _get_buffer(request: Request) -> RecencyBuffer:
    """Resolve RecencyBuffer from app state."""
    return request.app.state.recency_buffer  # type: ignore[no-any-return]


@router.get("/tail/{n}", response_model=list[str])
def get_tail(
    request: Request,
    n: Annotated[int, Path(ge=0, description="Number of reports to drain")],
) -> list[str]:
    """Remove and return up to ``n`` recent reports, most recent first.

    Drained reports are not returned again by later calls.
    """
    return _get_buffer(request).drain(n)
