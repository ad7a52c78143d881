"""
Slice algebra for strided Vector views.

A slice key names a ``(start, end, step)`` triple in which any component
may be omitted with the `_` sentinel. This module turns such keys into a
`ResolvedSlice` against a concrete parent length:

- step: `_` -> 1; 0 is rejected with `BadStrideError`.
- start: `_` -> 0 for a positive step, ``size - 1`` for a negative one.
- end: `_` -> ``size`` for a positive step, -1 for a negative one. The -1
  produced here means "before index 0" and is never wrapped.
- explicit negative start/end are wrapped by adding ``size`` until they
  become non-negative (an explicit -1 therefore means ``size - 1``).
- length = ``(|end - start| + |step| - 1) // |step|``.

Python `slice` objects are accepted too, with ``None`` standing for `_`.
Note that ends are not clamped to the parent length the way built-in
sequences clamp them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ._errors import BadStrideError


class DefaultIndex:
    """
    Marker for an omitted slice component.

    There is exactly one instance, exported as `_`. It is distinct from every
    integer, so ``v[_, -1]`` and ``v[0, -1]`` are never confused.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "DefaultIndex":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "_"

    def __reduce__(self):
        return (DefaultIndex, ())


_ = DefaultIndex()

Component = Union[int, DefaultIndex]


def _component(value: Any) -> Component:
    if value is None or value is _:
        return _
    try:
        return int(value.__index__())
    except AttributeError:
        raise TypeError(
            f"slice components must be integers or _, got {value!r}"
        ) from None


def _wrap(index: int, size: int) -> int:
    # repeated `index += size` until non-negative; equal to modulo for size > 0
    if index >= 0:
        return index
    if size == 0:
        raise IndexError(f"cannot wrap negative index {index} for length 0")
    return index % size


@dataclass(frozen=True)
class ResolvedSlice:
    """
    Concrete view parameters against a known parent length.

    Attributes
    ----------
    start : int
        First parent index read by the view.
    end : int
        Exclusive bound; -1 with a negative step means "before index 0".
    step : int
        Non-zero stride between consecutive view elements.
    """

    start: int
    end: int
    step: int

    @property
    def length(self) -> int:
        span = abs(self.end - self.start)
        stride = abs(self.step)
        return (span + stride - 1) // stride

    def index(self, i: int) -> int:
        """Return the parent index of view element ``i``."""
        return self.start + i * self.step


@dataclass(frozen=True)
class SliceSpec:
    """
    An unresolved ``(start, end, step)`` triple.

    Parameters
    ----------
    start, end, step : int or `_`
        Components; `_` requests the default described in the module notes.
    """

    start: Component = _
    end: Component = _
    step: Component = _

    @classmethod
    def from_key(cls, key: Any) -> "SliceSpec":
        """
        Build a slice triple from an indexing key.

        Parameters
        ----------
        key : slice, tuple or `_`
            ``slice(start, stop, step)``, ``(start, end)``,
            ``(start, end, step)`` or `_` alone (the full range).

        Returns
        -------
        SliceSpec
            The parsed triple.

        Raises
        ------
        TypeError
            If the key is not a slice shape or a component is not integral.
        """
        if key is _:
            return cls()
        if isinstance(key, slice):
            return cls(
                _component(key.start), _component(key.stop), _component(key.step)
            )
        if isinstance(key, tuple) and len(key) in (2, 3):
            return cls(*(_component(k) for k in key))
        raise TypeError(
            "slice key must be a slice, _, or a (start, end[, step]) tuple; "
            f"got {key!r}"
        )

    def resolve(self, size: int) -> ResolvedSlice:
        """
        Resolve the triple against a parent of length ``size``.

        Raises
        ------
        BadStrideError
            If ``step == 0``.
        IndexError
            If a negative component must be wrapped against ``size == 0``.
        """
        step = 1 if self.step is _ else self.step
        if step == 0:
            raise BadStrideError(step)

        if self.start is _:
            start = 0 if step > 0 else size - 1
        else:
            start = _wrap(self.start, size)

        if self.end is _:
            end = size if step > 0 else -1
        else:
            end = _wrap(self.end, size)

        return ResolvedSlice(start, end, step)


def is_slice_key(key: Any) -> bool:
    """Return True if ``key`` selects a view rather than a single element."""
    return key is _ or isinstance(key, (slice, tuple))
