"""Centralised settings for the link refresher.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Link source
    # ------------------------------------------------------------------
    links_file: Path = field(
        default_factory=lambda: Path(os.environ.get("LINKS_FILE", "./links.txt"))
    )

    # ------------------------------------------------------------------
    # HTTP listener
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "8000")))


# Module-level singleton, import this everywhere:
#   from refresher.config import settings
settings = Settings()
