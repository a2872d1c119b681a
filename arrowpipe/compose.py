"""Shorthand for building a linear chain of arrows."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from .arrow import Arrow
from .protocol import Essence


def pipe(
    first: Union[Essence[Any, Any], Arrow[Any, Any]],
    *rest: Union[Essence[Any, Any], Arrow[Any, Any]],
    name: Optional[str] = None,
) -> Arrow[Any, Any]:
    """Build an arrow that runs *first* and then each of *rest* in order.

    Plain callables are wrapped in fresh arrows.  Arrows passed in are used
    as-is, so they must not already be attached elsewhere.  If any step
    cannot be attached, the attachments made so far are undone and the
    error is re-raised; arrows passed in are left as they were.

    Example::

        inc_then_double = pipe(add_one, double)
        inc_then_double(1)  # 4
    """
    root = first if isinstance(first, Arrow) else Arrow(first)
    added: List[int] = []
    try:
        for step in rest:
            added.append(root.attach(step if isinstance(step, Arrow) else Arrow(step)))
    except Exception:
        for index in reversed(added):
            root.remove(index)
        raise
    if name is not None:
        root.name = name
    return root
