"""
Utility structures shared by the weightgraph algorithms.

This module provides the indexed min-priority queue used by the shortest path
and spanning tree builders.
"""

import heapq
import itertools
import logging
from typing import Dict, Hashable, List, Optional, Tuple

logger = logging.getLogger(__name__)

_REMOVED = object()


class IndexedPriorityQueue:
    """
    Binary heap keyed by item with decrease-key support.

    Each item has at most one live entry. Updating an item's priority marks the
    old heap entry as removed and pushes a fresh one, so a stale entry is never
    returned by pop(). Ties between equal priorities are broken by insertion
    order, with an update counting as a new insertion.
    """

    def __init__(self):
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item) -> bool:
        return item in self._entries

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, item: Hashable, priority: int):
        """
        Insert an item, or replace the priority of an item already queued.

        Args:
            item: Hashable item to queue
            priority: Priority key, lower pops first
        """
        if item in self._entries:
            self.remove(item)
        entry = [priority, next(self._counter), item]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def decrease_key(self, item: Hashable, priority: int) -> bool:
        """
        Lower the priority of a queued item.

        Returns:
            True if the item was queued and its priority improved
        """
        entry = self._entries.get(item)
        if entry is None or priority >= entry[0]:
            return False
        self.push(item, priority)
        return True

    def remove(self, item: Hashable):
        """Invalidate the live entry of an item."""
        entry = self._entries.pop(item)
        entry[-1] = _REMOVED

    def priority(self, item: Hashable) -> Optional[int]:
        entry = self._entries.get(item)
        return None if entry is None else entry[0]

    def pop(self) -> Tuple[Hashable, int]:
        """
        Remove and return the item with the lowest priority.

        Returns:
            Tuple of (item, priority)

        Raises:
            IndexError: If the queue is empty
        """
        while self._heap:
            priority, _, item = heapq.heappop(self._heap)
            if item is not _REMOVED:
                del self._entries[item]
                return item, priority
        raise IndexError("pop from an empty priority queue")
