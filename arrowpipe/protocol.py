"""Essence type and the structural protocol every arrow satisfies."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")

T_contra = TypeVar("T_contra", contravariant=True)
U_co = TypeVar("U_co", covariant=True)

#: A unary transformation ``T -> U``.  Assumed pure: composition results are
#: deterministic only when essences do not depend on captured mutable state.
Essence = Callable[[T], U]


@runtime_checkable
class ArrowLike(Protocol[T_contra, U_co]):
    """Structural protocol for anything that runs like an arrow.

    ``Arrow`` satisfies it; so does any object exposing the same three
    entry points.  Calling the object runs the forward chain.

    Example::

        class Constant:
            def apply(self, value):
                return 42

            def execute(self, value):
                return 42

            def __call__(self, value):
                return 42
    """

    def apply(self, value: T_contra) -> U_co: ...

    def execute(self, value: T_contra) -> U_co: ...

    def __call__(self, value: T_contra) -> U_co: ...
