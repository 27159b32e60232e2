"""Runtime configuration for orderdesk.

Settings come from the environment; a ``.env`` file in the working
directory is loaded first so local overrides need no shell exports.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    currency: str = "USD"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def drafts_file(self) -> Path:
        return self.data_dir / "drafts.json"


def load_settings() -> Settings:
    """Read settings from the environment (and ``.env``) on every call."""
    load_dotenv()
    return Settings(
        data_dir=Path(os.environ.get("ORDERDESK_DATA_DIR", str(DEFAULT_DATA_DIR))),
        log_level=os.environ.get("ORDERDESK_LOG_LEVEL", "WARNING").upper(),
        currency=os.environ.get("ORDERDESK_CURRENCY", "USD").upper(),
    )
