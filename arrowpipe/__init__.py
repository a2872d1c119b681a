"""Composable unary transformations with no I/O and no hidden state.

Public surface::

    from arrowpipe import (
        Arrow,
        ArrowLike,
        Essence,
        pipe,
        ArrowConfig,
        get_config,
        configure,
        reset_config,
        ArrowError,
        ArrowIndexError,
        ArrowOwnershipError,
        ArrowDepthError,
        ArrowConfigError,
    )
"""

from .arrow import Arrow
from .compose import pipe
from .config import ArrowConfig, configure, get_config, reset_config
from .errors import (
    ArrowConfigError,
    ArrowDepthError,
    ArrowError,
    ArrowIndexError,
    ArrowOwnershipError,
)
from .protocol import ArrowLike, Essence

__version__ = "0.1.0"

__all__ = [
    "Arrow",
    "ArrowLike",
    "Essence",
    "pipe",
    "ArrowConfig",
    "get_config",
    "configure",
    "reset_config",
    "ArrowError",
    "ArrowIndexError",
    "ArrowOwnershipError",
    "ArrowDepthError",
    "ArrowConfigError",
]
