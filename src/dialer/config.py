"""Settings from environment variables, with .env loaded from repo root or cwd."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: src/dialer/config.py -> parent.parent.parent
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

BACKEND_MEMORY = "memory"
BACKEND_NEO4J = "neo4j"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_env() -> Path | None:
    """Load the first .env found (repo root, then cwd). Returns its path or None."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


@dataclass(frozen=True)
class Settings:
    backend: str = BACKEND_MEMORY
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    default_region: str | None = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.backend not in (BACKEND_MEMORY, BACKEND_NEO4J):
            raise ValueError(f"Unknown backend: {self.backend!r}")

    @classmethod
    def from_env(cls) -> "Settings":
        load_env()
        return cls(
            backend=os.environ.get("DIALER_BACKEND", BACKEND_MEMORY).strip().lower(),
            neo4j_uri=os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip(),
            neo4j_user=os.environ.get("NEO4J_USER", "neo4j").strip(),
            neo4j_password=os.environ.get("NEO4J_PASSWORD", "password").strip(),
            default_region=os.environ.get("DIALER_DEFAULT_REGION", "").strip().upper() or None,
            log_level=os.environ.get("DIALER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
