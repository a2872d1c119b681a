"""Process-wide arrowpipe settings.

Settings are read from the environment (optionally seeded from a ``.env``
file) the first time they are needed, and can be overridden in code::

    from arrowpipe import configure

    configure(trace=True, max_depth=32)

Environment variables:

- ``ARROWPIPE_TRACE``: log every essence application at DEBUG level.
- ``ARROWPIPE_MAX_DEPTH``: maximum height of an arrow tree (unset = unbounded).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ArrowConfigError

logger = logging.getLogger(__name__)

ENV_TRACE = "ARROWPIPE_TRACE"
ENV_MAX_DEPTH = "ARROWPIPE_MAX_DEPTH"


def _env_paths() -> list[Path]:
    # Resolved per call: home and working directory may change after import.
    return [
        Path.home() / ".arrowpipe" / ".env",
        Path.cwd() / ".env",
    ]


class ArrowConfig(BaseModel):
    """Validated arrowpipe settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    trace: bool = Field(
        default=False,
        description="Log input and output of every essence application at DEBUG",
    )
    max_depth: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum height of an arrow tree; None means unbounded",
    )

    @classmethod
    def from_env(cls, *, load_env_file: bool = True) -> "ArrowConfig":
        """Build settings from ``ARROWPIPE_*`` environment variables.

        When *load_env_file* is set, the first existing ``.env`` file among
        ``~/.arrowpipe/.env`` and ``./.env`` is loaded first.  Variables
        already present in the environment win over the file.
        """
        if load_env_file:
            for env_path in _env_paths():
                if env_path.exists():
                    load_dotenv(env_path)
                    logger.debug("Loaded arrowpipe settings from %s", env_path)
                    break

        raw: dict[str, Any] = {}
        trace = os.environ.get(ENV_TRACE, "").strip()
        if trace:
            raw["trace"] = trace
        max_depth = os.environ.get(ENV_MAX_DEPTH, "").strip()
        if max_depth:
            raw["max_depth"] = max_depth
        return _validate(raw)


def _validate(values: dict[str, Any]) -> ArrowConfig:
    try:
        return ArrowConfig(**values)
    except ValidationError as exc:
        raise ArrowConfigError(f"Invalid arrowpipe configuration: {exc}") from exc


_config: Optional[ArrowConfig] = None


def get_config() -> ArrowConfig:
    """Return the active settings, reading the environment on first use."""
    global _config
    if _config is None:
        _config = ArrowConfig.from_env()
    return _config


def configure(**changes: Any) -> ArrowConfig:
    """Install new settings derived from the active ones and return them.

    Unknown keys and invalid values raise :class:`ArrowConfigError`; the
    active settings are left unchanged in that case.
    """
    global _config
    merged = {**get_config().model_dump(), **changes}
    _config = _validate(merged)
    logger.debug("arrowpipe configured: %s", _config)
    return _config


def reset_config() -> None:
    """Forget installed settings so the next lookup re-reads the environment."""
    global _config
    _config = None
