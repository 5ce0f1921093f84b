"""Settings read from the environment (and a .env file, when present)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

STORAGE_JSON = "json"
STORAGE_NEO4J = "neo4j"
STORAGE_KINDS = (STORAGE_JSON, STORAGE_NEO4J)

# Repo root: from src/roster/config.py go up to repo root.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    storage: str = STORAGE_JSON
    data_file: Path = Path("data") / "roster.json"
    default_region: str | None = "US"
    log_level: str = "INFO"
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"

    def __post_init__(self):
        if self.storage not in STORAGE_KINDS:
            raise ValueError(
                f"Unsupported storage {self.storage!r}; expected one of {', '.join(STORAGE_KINDS)}."
            )


def load_env_file() -> None:
    """Load .env from repo root or current dir (first one found wins)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environ (defaults to os.environ). Blank values fall back to defaults."""
    env = os.environ if environ is None else environ
    defaults = Settings()

    def get(key: str, default: str) -> str:
        return (env.get(key) or "").strip() or default

    region = get("ROSTER_DEFAULT_REGION", defaults.default_region or "")
    return Settings(
        storage=get("ROSTER_STORAGE", defaults.storage).lower(),
        data_file=Path(get("ROSTER_DATA_FILE", str(defaults.data_file))),
        default_region=region.upper() or None,
        log_level=get("ROSTER_LOG_LEVEL", defaults.log_level).upper(),
        neo4j_uri=get("NEO4J_URI", defaults.neo4j_uri),
        neo4j_user=get("NEO4J_USER", defaults.neo4j_user),
        neo4j_password=get("NEO4J_PASSWORD", defaults.neo4j_password),
    )
