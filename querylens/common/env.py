"""Utilities for loading environment configuration files."""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)


def load_environment() -> Optional[Path]:
    """Load environment variables based on QUERYLENS_ENV or DOTENV_PATH.

    Precedence:
    1. DOTENV_PATH environment variable (explicit override)
    2. QUERYLENS_ENV environment variable (loads .env.<name>)
    3. Fallback to .env if present, otherwise default load.

    Returns:
        Path to the dotenv file that was loaded, or None if nothing matched.
    """
    explicit_path = os.getenv("DOTENV_PATH")
    search_paths = []

    if explicit_path:
        search_paths.append(Path(explicit_path))

    configured_env = os.getenv("QUERYLENS_ENV")
    if configured_env:
        search_paths.append(Path(f".env.{configured_env}"))

    if Path(".env") not in search_paths:
        search_paths.append(Path(".env"))

    loaded_path: Optional[Path] = None
    for path in search_paths:
        if path.exists():
            load_dotenv(dotenv_path=path)
            loaded_path = path
            LOGGER.info("Loaded environment variables from %s", path)
            break

    if loaded_path is None:
        load_dotenv()
        LOGGER.warning(
            "No explicit dotenv file found; relying on default load order."
        )

    os.environ.setdefault("QUERYLENS_ENV", configured_env or "dev")

    return loaded_path
