"""Monitor configuration model for quant-monitor."""

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from quant_monitor.signals import DEFAULT_WINDOW_SIZE


class MonitorConfig(BaseModel):
    """Settings for the periodic fetch/report loop and the tail server."""

    source: Path = Field(
        default=Path("sp500.may.2020.txt"),
        description="Text file holding comma-separated symbols",
    )
    start: datetime = Field(
        ...,
        description="Start of the period to fetch (naive values are UTC)",
    )
    output: Path = Field(
        default=Path("out.csv"),
        description="CSV file reports are appended to",
    )
    max_iterations: int | None = Field(
        default=None,
        ge=0,
        description="Number of ticks to run; 0 or unset runs forever",
    )
    interval_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Seconds between the start of two ticks",
    )
    buffer_capacity: int = Field(
        default=10,
        ge=1,
        description="Number of recent reports kept for the tail endpoint",
    )
    window_size: int = Field(
        default=DEFAULT_WINDOW_SIZE,
        ge=2,
        description="Moving-average window (number of closes)",
    )
    serve: bool = Field(default=True, description="Expose GET /tail/{n} while running")
    host: str = Field(default="127.0.0.1", description="Tail server bind host")
    port: int = Field(default=8080, ge=1, le=65535, description="Tail server bind port")

    @field_validator("start")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        """Attach UTC to naive start datetimes."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def iteration_limit(self) -> int | None:
        """Iteration cap, with 0 normalised to None (unbounded)."""
        return self.max_iterations or None
