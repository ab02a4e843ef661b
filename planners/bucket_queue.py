#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bucketed min-priority queue.

Entries are grouped into fixed-width cost buckets indexed by
floor(priority / bucket_width). A pop walks buckets in ascending index order
and linearly scans the first non-empty one for the exact minimum, so it never
returns a non-minimal entry.

This is not a heap: a pop costs O(number of buckets + size of the lowest
bucket), which is linear in the worst case. It is adequate for small grids
with small, clustered edge weights (1 and 1000 here).
"""

from __future__ import annotations
from typing import Dict, Hashable, List, Optional


class BucketQueue:
    def __init__(self, bucket_width: int = 100):
        if int(bucket_width) <= 0:
            raise ValueError(f"bucket_width must be positive, got {bucket_width}")
        self.bucket_width = int(bucket_width)
        self._buckets: List[Dict[Hashable, float]] = []
        self._where: Dict[Hashable, int] = {}   # item -> bucket index
        self._lowest = 0                        # no entries below this bucket

    def _bucket_index(self, priority: float) -> int:
        return int(priority // self.bucket_width)

    def insert_or_update(self, item: Hashable, priority: float) -> None:
        """Insert `item`, replacing any previous entry (decrease-key)."""
        if priority < 0:
            raise ValueError(f"priority must be non-negative, got {priority}")
        self.remove(item)
        b = self._bucket_index(priority)
        while len(self._buckets) <= b:
            self._buckets.append({})
        self._buckets[b][item] = priority
        self._where[item] = b
        self._lowest = min(self._lowest, b)

    def remove(self, item: Hashable) -> bool:
        b = self._where.pop(item, None)
        if b is None:
            return False
        del self._buckets[b][item]
        return True

    def pop_minimum(self) -> Optional[Hashable]:
        """Remove and return the lowest-priority item, or None when empty."""
        if not self._where:
            return None
        for b in range(self._lowest, len(self._buckets)):
            bucket = self._buckets[b]
            if not bucket:
                continue
            self._lowest = b
            item = min(bucket, key=bucket.__getitem__)
            del bucket[item]
            del self._where[item]
            return item
        return None

    def priority_of(self, item: Hashable) -> Optional[float]:
        b = self._where.get(item)
        return None if b is None else self._buckets[b][item]

    def bucket_sizes(self) -> Dict[int, int]:
        """Bucket index -> number of entries (debug statistics)."""
        return {b: len(bucket) for b, bucket in enumerate(self._buckets)}

    def __len__(self) -> int:
        return len(self._where)

    def __contains__(self, item: Hashable) -> bool:
        return item in self._where

    def __bool__(self) -> bool:
        return bool(self._where)
