#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Binary-heap priority queue with the BucketQueue interface.
- heapq with lazy invalidation: an update marks the old entry stale and pushes
  a new one; stale entries are discarded when they reach the top.
- Ties are broken by insertion order, so items never need to be comparable.
"""

from __future__ import annotations
from typing import Dict, Hashable, List, Optional
import heapq
import itertools


class HeapQueue:
    def __init__(self, bucket_width: Optional[int] = None):
        # bucket_width is accepted so both queues share one factory signature
        self._heap: List[list] = []
        self._entries: Dict[Hashable, list] = {}
        self._counter = itertools.count()

    def insert_or_update(self, item: Hashable, priority: float) -> None:
        if priority < 0:
            raise ValueError(f"priority must be non-negative, got {priority}")
        self.remove(item)
        entry = [priority, next(self._counter), item, True]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, item: Hashable) -> bool:
        entry = self._entries.pop(item, None)
        if entry is None:
            return False
        entry[3] = False  # stale
        return True

    def pop_minimum(self) -> Optional[Hashable]:
        while self._heap:
            _, _, item, live = heapq.heappop(self._heap)
            if live:
                del self._entries[item]
                return item
        return None

    def priority_of(self, item: Hashable) -> Optional[float]:
        entry = self._entries.get(item)
        return None if entry is None else entry[0]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: Hashable) -> bool:
        return item in self._entries

    def __bool__(self) -> bool:
        return bool(self._entries)
