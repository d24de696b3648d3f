"""
Entry Arena Module

This module implements the ordering structure behind LRUCache.

Entries live in a table of slots addressed by stable integer ids. The slots
are linked into a doubly linked recency list through their ids, so the index
in front of the arena only ever stores an id, never a node or a value.

Recency order:
- The HEAD of the list is the most recently used entry
- The TAIL of the list is the least recently used entry
- Released slot ids are recycled through a free list

All operations are O(1) except iter_slots() and clear().
"""

from typing import Any, Hashable, Iterator, List, Optional, Tuple


class _Slot:
    """A single arena cell: one entry plus the ids of its neighbours."""

    __slots__ = ("key", "value", "prev", "next", "live", "linked")

    def __init__(self) -> None:
        self.key: Hashable = None
        self.value: Any = None
        self.prev: Optional[int] = None
        self.next: Optional[int] = None
        self.live = False
        self.linked = False


class EntryArena:
    """
    Slot table holding cache entries in recency order.

    Usage:
        arena = EntryArena(max_slots=3)
        slot = arena.allocate("key1", "value1")
        arena.push_front(slot)
        arena.move_to_front(slot)
        key, value = arena.release(slot)

    A slot id stays valid from allocate() until release(). The table never
    grows beyond max_slots cells.

    Attributes:
        max_slots: Maximum number of cells the table may hold
    """

    def __init__(self, max_slots: int):
        self.max_slots = max_slots
        self._slots: List[_Slot] = []
        self._free: List[int] = []
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._linked = 0

    def allocate(self, key: Hashable, value: Any) -> int:
        """
        Store an entry in a free slot.

        Args:
            key: The entry key
            value: The entry value

        Returns:
            The id of the slot now holding the entry (not yet linked)

        Raises:
            MemoryError: If every one of max_slots cells is live
        """
        if self._free:
            slot_id = self._free.pop()
        elif len(self._slots) < self.max_slots:
            slot_id = len(self._slots)
            self._slots.append(_Slot())
        else:
            raise MemoryError(f"arena is full ({self.max_slots} slots)")

        slot = self._slots[slot_id]
        slot.key = key
        slot.value = value
        slot.live = True
        return slot_id

    def release(self, slot_id: int) -> Tuple[Hashable, Any]:
        """
        Free a slot, unlinking it first if needed.

        Args:
            slot_id: A live slot id

        Returns:
            The (key, value) pair that the slot held
        """
        slot = self._live(slot_id)
        if slot.linked:
            self.unlink(slot_id)

        key, value = slot.key, slot.value
        slot.key = None
        slot.value = None
        slot.live = False
        self._free.append(slot_id)
        return key, value

    def push_front(self, slot_id: int) -> None:
        """Link an unlinked slot at the head of the recency list."""
        slot = self._live(slot_id)
        if slot.linked:
            raise ValueError(f"slot {slot_id} is already linked")

        slot.prev = None
        slot.next = self._head
        if self._head is not None:
            self._slots[self._head].prev = slot_id
        self._head = slot_id
        if self._tail is None:
            self._tail = slot_id

        slot.linked = True
        self._linked += 1

    def unlink(self, slot_id: int) -> None:
        """Detach a slot from the recency list, keeping its entry."""
        slot = self._live(slot_id)
        if not slot.linked:
            raise ValueError(f"slot {slot_id} is not linked")

        if slot.prev is not None:
            self._slots[slot.prev].next = slot.next
        else:
            self._head = slot.next

        if slot.next is not None:
            self._slots[slot.next].prev = slot.prev
        else:
            self._tail = slot.prev

        slot.prev = None
        slot.next = None
        slot.linked = False
        self._linked -= 1

    def move_to_front(self, slot_id: int) -> None:
        """Make a linked slot the most recently used one."""
        if slot_id == self._head:
            return
        self.unlink(slot_id)
        self.push_front(slot_id)

    def key(self, slot_id: int) -> Hashable:
        return self._live(slot_id).key

    def value(self, slot_id: int) -> Any:
        return self._live(slot_id).value

    def set_value(self, slot_id: int, value: Any) -> None:
        self._live(slot_id).value = value

    @property
    def head(self) -> Optional[int]:
        """Id of the most recently used slot, or None if empty."""
        return self._head

    @property
    def tail(self) -> Optional[int]:
        """Id of the least recently used slot, or None if empty."""
        return self._tail

    def iter_slots(self, reverse: bool = False) -> Iterator[int]:
        """
        Walk the recency list.

        Args:
            reverse: Walk from tail (LRU) to head (MRU) instead

        Yields:
            Slot ids in recency order
        """
        slot_id = self._tail if reverse else self._head
        while slot_id is not None:
            slot = self._slots[slot_id]
            yield slot_id
            slot_id = slot.prev if reverse else slot.next

    def clear(self) -> None:
        """Drop every slot and reset the list."""
        self._slots.clear()
        self._free.clear()
        self._head = None
        self._tail = None
        self._linked = 0

    def __len__(self) -> int:
        return self._linked

    def _live(self, slot_id: int) -> _Slot:
        if not 0 <= slot_id < len(self._slots) or not self._slots[slot_id].live:
            raise IndexError(f"slot {slot_id} is not live")
        return self._slots[slot_id]
