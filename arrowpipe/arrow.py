"""Arrow: a unary transformation plus the arrows attached to run after it."""

from __future__ import annotations

import logging
import operator
from typing import Any, Generic, Iterator, List, Optional, Self, Tuple

from .config import get_config
from .errors import (
    ArrowConfigError,
    ArrowDepthError,
    ArrowIndexError,
    ArrowOwnershipError,
)
from .protocol import Essence, T, U

logger = logging.getLogger(__name__)


def _essence_name(essence: Essence[Any, Any]) -> str:
    name = getattr(essence, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(essence)


class Arrow(Generic[T, U]):
    """A transformation node: one essence and an ordered list of attached arrows.

    Running an arrow applies its essence first, then feeds the result through
    every attached arrow in turn.  Attached arrows map the essence's output
    type onto itself (``Arrow[U, U]``), so any number of them can be chained
    and each may carry attachments of its own.

    Arrows form a strict ownership tree: attaching moves the child under its
    new parent, and an arrow can have at most one parent at a time.  Removing
    or clearing releases the children, after which they may be attached
    elsewhere.

    Example::

        arrow = Arrow(lambda x: x + 1)
        arrow.attach(Arrow(lambda x: x * 2))
        arrow.attach(Arrow(lambda x: x - 1))
        arrow.execute(1)  # (1 + 1) * 2 - 1 == 3

    Args:
        essence: Unary callable applied first on every run.  Assumed pure.
        name: Label used by ``repr``, :meth:`describe` and trace logging.
            Defaults to the essence's ``__name__``.
    """

    def __init__(self, essence: Essence[T, U], *, name: Optional[str] = None) -> None:
        if not callable(essence):
            raise ArrowConfigError(
                f"Arrow essence must be callable, got {type(essence).__name__}"
            )
        self._essence = essence
        self._attached: List[Arrow[U, U]] = []
        self._owner: Optional[Arrow[Any, Any]] = None
        self.name = name if name is not None else _essence_name(essence)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def essence(self) -> Essence[T, U]:
        """The wrapped transformation.  Fixed for the arrow's lifetime."""
        return self._essence

    @property
    def attached(self) -> Tuple[Arrow[U, U], ...]:
        """Snapshot of the attached arrows in execution order."""
        return tuple(self._attached)

    @property
    def is_attached(self) -> bool:
        """*True* while this arrow is owned by another arrow."""
        return self._owner is not None

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def attach(self, child: Arrow[U, U]) -> int:
        """Move *child* to the end of the attached list and return its index.

        Raises:
            ArrowOwnershipError: *child* already has a parent, is this arrow,
                or is one of its ancestors.
            ArrowDepthError: the tree would grow past ``max_depth``.
        """
        if not isinstance(child, Arrow):
            raise TypeError(
                f"Only arrows can be attached, got {type(child).__name__}"
            )
        if child is self or self._has_ancestor(child):
            raise ArrowOwnershipError(
                f"Attaching {child!r} to {self!r} would create a cycle"
            )
        if child._owner is not None:
            raise ArrowOwnershipError(
                f"{child!r} is already attached to {child._owner!r}"
            )

        max_depth = get_config().max_depth
        if max_depth is not None:
            depth = self._level() + 1 + child.depth()
            if depth > max_depth:
                raise ArrowDepthError(depth, max_depth)

        self._attached.append(child)
        child._owner = self
        index = len(self._attached) - 1
        logger.debug("Attached %s to %s at index %d", child.name, self.name, index)
        return index

    symbiotize = attach

    def remove(self, index: int) -> None:
        """Remove the attached arrow at *index*; later arrows shift down by one.

        Raises:
            ArrowIndexError: *index* is outside ``0 <= index < len(self)``.
            TypeError: *index* is not an integer.
        """
        position = self._check_index(index)
        child = self._attached.pop(position)
        child._owner = None
        logger.debug("Removed %s from %s at index %d", child.name, self.name, position)

    def clear(self) -> None:
        """Detach every attached arrow; afterwards running applies only the essence."""
        for child in self._attached:
            child._owner = None
        count = len(self._attached)
        self._attached.clear()
        logger.debug("Cleared %d attached arrow(s) from %s", count, self.name)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def apply(self, value: T) -> U:
        """Apply only the essence, ignoring attached arrows."""
        result = self._essence(value)
        if get_config().trace:
            logger.debug("%s: %r -> %r", self.name, value, result)
        return result

    def execute(self, value: T) -> U:
        """Apply the essence, then every attached arrow in insertion order."""
        return self._run(value, reverse=False)

    def execute_reverse(self, value: T) -> U:
        """Apply the essence, then attached arrows from last to first.

        Attached arrows run their own attachments in reverse as well.
        """
        return self._run(value, reverse=True)

    def _run(self, value: Any, *, reverse: bool) -> Any:
        # Essences apply in pre-order over the whole tree.
        stack: List[Arrow[Any, Any]] = [self]
        while stack:
            arrow = stack.pop()
            value = arrow.apply(value)
            if reverse:
                stack.extend(arrow._attached)
            else:
                stack.extend(reversed(arrow._attached))
        return value

    # Arrow vocabulary: shooting an arrow runs it.
    shoot = execute
    shoot_reverse = execute_reverse

    def __call__(self, value: T) -> U:
        return self.execute(value)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._attached)

    def __bool__(self) -> bool:
        # An arrow without attachments is still a usable arrow.
        return True

    def __iter__(self) -> Iterator[Arrow[U, U]]:
        return iter(tuple(self._attached))

    def __getitem__(self, index: int) -> Arrow[U, U]:
        return self._attached[self._check_index(index)]

    def depth(self) -> int:
        """Height of the subtree rooted here; a bare arrow has depth 1."""
        return 1 + max(level for level, _ in self.walk())

    def size(self) -> int:
        """Number of arrows in the subtree, this one included."""
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator[Tuple[int, Arrow[Any, Any]]]:
        """Yield ``(level, arrow)`` pairs in pre-order, starting at level 0."""
        stack: List[Tuple[int, Arrow[Any, Any]]] = [(0, self)]
        while stack:
            level, arrow = stack.pop()
            yield level, arrow
            stack.extend((level + 1, child) for child in reversed(arrow._attached))

    def describe(self) -> str:
        """Render the subtree as an indented text tree of arrow names.

        Example output::

            add_one
                [0] double
                    [0] negate
                [1] subtract_one
        """
        lines: List[str] = []
        stack: List[Tuple[int, str, Arrow[Any, Any]]] = [(0, "", self)]
        while stack:
            level, label, arrow = stack.pop()
            lines.append(f"{'    ' * level}{label}{arrow.name}")
            for index in reversed(range(len(arrow._attached))):
                stack.append((level + 1, f"[{index}] ", arrow._attached[index]))
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Copying and comparison
    # ------------------------------------------------------------------

    def copy(self) -> Self:
        """Return an unowned structural copy of the subtree.

        Essences are shared between the copies; attached arrows are not.
        """
        clone = type(self)(self._essence, name=self.name)
        pending: List[Tuple[Arrow[Any, Any], Arrow[Any, Any]]] = [(self, clone)]
        while pending:
            source, target = pending.pop()
            for child in source._attached:
                child_copy = type(child)(child._essence, name=child.name)
                child_copy._owner = target
                target._attached.append(child_copy)
                pending.append((child, child_copy))
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arrow):
            return NotImplemented
        pending: List[Tuple[Arrow[Any, Any], Arrow[Any, Any]]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left._essence != right._essence:
                return False
            if len(left._attached) != len(right._attached):
                return False
            pending.extend(zip(left._attached, right._attached))
        return True

    # Mutable: attaching changes equality.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Arrow({self.name}, attached={len(self._attached)})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool):
            raise TypeError("Attached indices must be integers, not bool")
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeError(
                f"Attached indices must be integers, not {type(index).__name__}"
            ) from None
        if not 0 <= position < len(self._attached):
            raise ArrowIndexError(position, len(self._attached))
        return position

    def _has_ancestor(self, candidate: Arrow[Any, Any]) -> bool:
        owner = self._owner
        while owner is not None:
            if owner is candidate:
                return True
            owner = owner._owner
        return False

    def _level(self) -> int:
        level = 0
        owner = self._owner
        while owner is not None:
            level += 1
            owner = owner._owner
        return level
