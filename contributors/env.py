import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_DB = "data/contributors.db"
DEFAULT_LOG_LEVEL = "INFO"


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def settings() -> Dict[str, Any]:
    """Runtime settings read from the environment."""
    log_dir: Optional[str] = os.getenv("CONTRIBUTORS_LOG_DIR")
    return {
        "db_path": Path(os.getenv("CONTRIBUTORS_DB", DEFAULT_DB)),
        "log_level": os.getenv("CONTRIBUTORS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        "log_dir": Path(log_dir) if log_dir else None,
    }
