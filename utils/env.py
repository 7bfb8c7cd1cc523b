from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

"""Environment helper utilities.

Loads a `.env` file from the project root so that dataset settings
(e.g., ``CUSTOMER_DATASET_SIZE``, ``CUSTOMER_DATASET_SEED``) defined there
become available via ``os.getenv``. Variables already set in the process
environment win over the file.
"""

__all__ = ["load_project_dotenv"]

logger = logging.getLogger(__name__)

MAX_PARENT_LEVELS = 10


def _find_project_root(start: Path | None = None) -> Path:
    """Traverse upwards until we find a directory that contains `pyproject.toml`."""
    current = start or Path(__file__).resolve().parent
    for _ in range(MAX_PARENT_LEVELS):
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def load_project_dotenv() -> bool:
    """Load the project-level `.env` if present. Returns True when a file was read."""
    dotenv_path = _find_project_root() / ".env"
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    logger.debug(f"Loaded environment from {dotenv_path}")
    return True
