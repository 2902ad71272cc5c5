from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _to_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid CLIPANY_COMMAND_TIMEOUT: {value!r}")
        return None
    return timeout if timeout > 0 else None


@dataclass(frozen=True)
class ClipboardConfig:
    clipboard_manager: Optional[str] = None
    qdbus: str = "qdbus"
    command_timeout: Optional[float] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "ClipboardConfig":
        if env_path is not None:
            load_dotenv(dotenv_path=env_path)
        else:
            load_dotenv()

        return cls(
            clipboard_manager=os.getenv("CLIPANY_CLIPBOARD_MANAGER") or None,
            qdbus=os.getenv("CLIPANY_QDBUS") or cls.qdbus,
            command_timeout=_to_float(os.getenv("CLIPANY_COMMAND_TIMEOUT")),
            log_level=(os.getenv("CLIPANY_LOG_LEVEL") or cls.log_level).upper(),
        )
