from __future__ import annotations

import os
from dataclasses import dataclass

from .engine.fen import STARTPOS_FEN


@dataclass(frozen=True)
class Settings:
    """Service settings, read from ``MOVEGEN_*`` environment variables."""

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    default_fen: str = STARTPOS_FEN


def load_settings() -> Settings:
    port_raw = os.getenv("MOVEGEN_PORT", "8000")
    try:
        port = int(port_raw)
    except ValueError as e:
        raise ValueError(f"MOVEGEN_PORT must be an integer, got {port_raw!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"MOVEGEN_PORT out of range: {port}")
    return Settings(
        host=os.getenv("MOVEGEN_HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("MOVEGEN_LOG_LEVEL", "INFO").upper(),
        default_fen=os.getenv("MOVEGEN_DEFAULT_FEN", STARTPOS_FEN),
    )
