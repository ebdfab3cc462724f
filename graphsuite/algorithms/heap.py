"""Array-backed binary heap with stable handles.

Unlike ``heapq``, `Heap` supports in-place update and removal of arbitrary
elements in O(log n). Each inserted element gets an arena slot; the heap array
stores slot numbers, and every slot records its current array position. A
`Handle` names a slot, so it stays valid however the element moves, until the
element itself is popped or erased.

Freed slots are recycled through a free list. Each slot carries a generation
counter that is bumped on release, so a handle to a removed element is
detected instead of silently aliasing the slot's next occupant.

Ordering is injected as ``before(a, b)``: true when ``a`` belongs nearer the
top than ``b``. ``operator.lt`` gives a min-heap, ``operator.gt`` a max-heap.

Complexities:
    top, top_handle, get, len: O(1)
    insert, pop, update, erase: O(log n)
    construction from an iterable, copy: O(n)
"""

from __future__ import annotations

import operator
from copy import deepcopy
from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Dict, Generic, Iterable, List, Tuple, TypeVar

from graphsuite.errors import InvalidHandleError

T = TypeVar("T")

Before = Callable[[Any, Any], bool]

_owner_ids = count()


@dataclass(frozen=True)
class Handle:
    """Opaque reference to an element of a specific `Heap`.

    Handles are hashable and compare equal when they name the same element.
    """

    owner: int
    slot: int
    generation: int


class _Slot:
    __slots__ = ("value", "pos", "generation")

    def __init__(self, value: Any, pos: int) -> None:
        self.value = value
        self.pos = pos
        self.generation = 0


class Heap(Generic[T]):
    """Binary heap parametrized by an ordering predicate.

    Args:
        iterable: Initial elements, heapified in linear time. No handles are
            returned for them; use `top_handle` or insert individually if
            handles are needed.
        before: ``before(a, b)`` is True when ``a`` should be closer to the top.
    """

    def __init__(self, iterable: Iterable[T] = (), before: Before = operator.lt) -> None:
        self._before = before
        self._owner = next(_owner_ids)
        self._slots: List[_Slot] = []
        self._free: List[int] = []
        self._array: List[int] = []
        for value in iterable:
            self._array.append(self._allocate(value, len(self._array)))
        for idx in range(len(self._array) // 2 - 1, -1, -1):
            self._sift_down(idx)

    #
    # Queries
    #
    def __len__(self) -> int:
        return len(self._array)

    def __bool__(self) -> bool:
        return bool(self._array)

    def __contains__(self, handle: object) -> bool:
        """True if ``handle`` names a live element of this heap."""
        if not isinstance(handle, Handle) or handle.owner != self._owner:
            return False
        if not 0 <= handle.slot < len(self._slots):
            return False
        slot = self._slots[handle.slot]
        return slot.generation == handle.generation and slot.pos >= 0

    def top(self) -> T:
        """Return the top element without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._array:
            raise IndexError("top of empty heap")
        return self._slots[self._array[0]].value

    def top_handle(self) -> Handle:
        """Return the handle of the top element.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._array:
            raise IndexError("top of empty heap")
        return self._handle_for(self._array[0])

    def get(self, handle: Handle) -> T:
        """Return the value named by ``handle``.

        Raises:
            InvalidHandleError: If ``handle`` is not a live handle of this heap.
        """
        return self._slots[self._resolve(handle)].value

    #
    # Mutation
    #
    def insert(self, value: T) -> Handle:
        """Insert ``value`` and return a handle to it. No handle is invalidated."""
        pos = len(self._array)
        slot_id = self._allocate(value, pos)
        self._array.append(slot_id)
        self._sift_up(pos)
        return self._handle_for(slot_id)

    def pop(self) -> T:
        """Remove and return the top element.

        Only the popped element's handle is invalidated.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._array:
            raise IndexError("pop from empty heap")
        return self._remove_at(0)

    def update(self, handle: Handle, value: T) -> None:
        """Replace the value named by ``handle`` and restore heap order.

        Raises:
            InvalidHandleError: If ``handle`` is not a live handle of this heap.
        """
        slot_id = self._resolve(handle)
        slot = self._slots[slot_id]
        slot.value = value
        self._restore(slot.pos)

    def erase(self, handle: Handle) -> T:
        """Remove the element named by ``handle`` and return its value.

        Raises:
            InvalidHandleError: If ``handle`` is not a live handle of this heap.
        """
        slot_id = self._resolve(handle)
        return self._remove_at(self._slots[slot_id].pos)

    def clear(self) -> None:
        """Remove every element; all handles become invalid."""
        for slot_id in self._array:
            self._release(slot_id)
        self._array.clear()

    def copy(self) -> Heap[T]:
        """Return an independent heap with the same elements.

        Handles of this heap are not valid for the copy.
        """
        return self._clone(lambda value: value)

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> Heap[T]:
        """Like `copy`, but element values are deep-copied too."""
        return self._clone(lambda value: deepcopy(value, memo))

    def swap(self, other: Heap[T]) -> None:
        """Exchange contents with ``other``.

        Handles follow their elements: afterwards, handles obtained from
        ``other`` are valid for this heap and vice versa.
        """
        for attr in ("_before", "_owner", "_slots", "_free", "_array"):
            mine, theirs = getattr(self, attr), getattr(other, attr)
            setattr(self, attr, theirs)
            setattr(other, attr, mine)

    def is_valid_heap(self) -> bool:
        """Check the heap order and slot position bookkeeping. O(n)."""
        for pos, slot_id in enumerate(self._array):
            slot = self._slots[slot_id]
            if slot.pos != pos:
                return False
            if pos and self._before(slot.value, self._value_at((pos - 1) // 2)):
                return False
        return True

    #
    # Internals
    #
    def _clone(self, copy_value: Callable[[Any], Any]) -> Heap[T]:
        # New owner id: handles of this heap do not resolve in the clone.
        clone: Heap[T] = Heap(before=self._before)
        for slot_id in self._array:
            value = copy_value(self._slots[slot_id].value)
            clone._array.append(clone._allocate(value, len(clone._array)))
        return clone

    def _handle_for(self, slot_id: int) -> Handle:
        return Handle(self._owner, slot_id, self._slots[slot_id].generation)

    def _resolve(self, handle: Handle) -> int:
        if handle not in self:
            raise InvalidHandleError(f"{handle!r} is not a live handle of this heap.")
        return handle.slot

    def _allocate(self, value: Any, pos: int) -> int:
        if self._free:
            slot_id = self._free.pop()
            slot = self._slots[slot_id]
            slot.value = value
            slot.pos = pos
            return slot_id
        self._slots.append(_Slot(value, pos))
        return len(self._slots) - 1

    def _release(self, slot_id: int) -> Any:
        slot = self._slots[slot_id]
        value = slot.value
        slot.value = None
        slot.pos = -1
        slot.generation += 1
        self._free.append(slot_id)
        return value

    def _value_at(self, pos: int) -> Any:
        return self._slots[self._array[pos]].value

    def _swap(self, i: int, j: int) -> None:
        arr = self._array
        arr[i], arr[j] = arr[j], arr[i]
        self._slots[arr[i]].pos = i
        self._slots[arr[j]].pos = j

    def _remove_at(self, pos: int) -> Any:
        last = len(self._array) - 1
        if pos != last:
            self._swap(pos, last)
        slot_id = self._array.pop()
        value = self._release(slot_id)
        if pos < len(self._array):
            self._restore(pos)
        return value

    def _restore(self, pos: int) -> None:
        """Sift the element at ``pos`` in whichever direction heap order needs."""
        if pos > 0 and self._before(self._value_at(pos), self._value_at((pos - 1) // 2)):
            self._sift_up(pos)
        else:
            self._sift_down(pos)

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._before(self._value_at(pos), self._value_at(parent)):
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        size = len(self._array)
        while True:
            best = pos
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < size and self._before(
                    self._value_at(child), self._value_at(best)
                ):
                    best = child
            if best == pos:
                return
            self._swap(pos, best)
            pos = best

    def __repr__(self) -> str:
        top = repr(self.top()) if self._array else "-"
        return f"{type(self).__name__}(size={len(self)}, top={top})"


def MinHeap(iterable: Iterable[T] = ()) -> Heap[T]:
    """Heap whose top is the smallest element."""
    return Heap(iterable, before=operator.lt)


def MaxHeap(iterable: Iterable[T] = ()) -> Heap[T]:
    """Heap whose top is the largest element."""
    return Heap(iterable, before=operator.gt)


def PriorityQueue(
    iterable: Iterable[Tuple[Any, Any]] = (), before: Before = operator.lt
) -> Heap[Tuple[Any, Any]]:
    """Heap of ``(priority, item)`` pairs ordered by priority only.

    Items never need to be comparable. With the default ``before`` the
    smallest priority is on top.
    """
    return Heap(iterable, before=lambda a, b: before(a[0], b[0]))


def to_sorted_list(heap: Heap[T]) -> List[T]:
    """Return the elements of ``heap`` in pop order, leaving ``heap`` intact."""
    scratch = heap.copy()
    out: List[T] = []
    while scratch:
        out.append(scratch.pop())
    return out

