"""Identity-keyed object storage for brepkernel.

Every topological object lives in a :class:`Store` and is referenced through
a :class:`Handle`.  Handles compare, order and hash by *storage identity*:
two handles are equal only if they were produced by the same ``insert``
call, regardless of whether the wrapped values happen to be equal.  This
is what lets caches be keyed on "this specific curve" rather than "a curve
with these coordinates".

Stored values are immutable.  An update never modifies a stored value;
it inserts a new value and hands out a new handle, so unaffected parts of
an object graph keep being shared.
"""

from __future__ import annotations

import itertools
import weakref
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar('T')

_serials = itertools.count()


class Handle(Generic[T]):
    """Shared reference to exactly one stored object.

    Attribute access is forwarded to the wrapped object, so
    ``half_edge.curve`` works on a ``Handle[HalfEdge]``.
    """

    __slots__ = ('_value', '_serial', '__weakref__')

    def __init__(self, value: T) -> None:
        self._value = value
        self._serial = next(_serials)

    def get(self) -> T:
        """Return the stored object."""
        return self._value

    @property
    def serial(self) -> int:
        return self._serial

    def __getattr__(self, name: str) -> Any:
        # only reached for names not defined on the handle itself
        if name.startswith('__') or name in ('_value', '_serial'):
            raise AttributeError(name)
        return getattr(self._value, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented
        return self._serial == other._serial

    def __lt__(self, other: 'Handle') -> bool:
        if not isinstance(other, Handle):
            return NotImplemented
        return self._serial < other._serial

    def __hash__(self) -> int:
        return hash(self._serial)

    def __copy__(self) -> 'Handle[T]':
        return self

    def __deepcopy__(self, memo) -> 'Handle[T]':
        return self

    def __repr__(self) -> str:
        return f'Handle<{type(self._value).__name__}>#{self._serial}'


class Store(Generic[T]):
    """Append-only store for objects of one kind.

    The store keeps weak references only: an entry lives exactly as long as
    some handle to it is alive.
    """

    def __init__(self, kind: str = 'object') -> None:
        self.kind = kind
        self._entries: 'weakref.WeakValueDictionary[int, Handle[T]]' = \
            weakref.WeakValueDictionary()

    def insert(self, value: T) -> Handle[T]:
        """Store ``value`` and return a new handle to it.

        Structurally equal values are not deduplicated.
        """
        handle = Handle(value)
        self._entries[handle.serial] = handle
        return handle

    def __iter__(self) -> Iterator[Handle[T]]:
        for serial in sorted(self._entries.keys()):
            handle = self._entries.get(serial)
            if handle is not None:
                yield handle

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, Handle):
            return False
        return self._entries.get(handle.serial) is handle

    def __repr__(self) -> str:
        return f'Store<{self.kind}>({len(self)} live)'


__all__ = ['Handle', 'Store']
