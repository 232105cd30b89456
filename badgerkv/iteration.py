"""Iteration settings and the checks used to decide what an iterator sees."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import AbstractSet, Optional, Protocol

BIT_DELETE = 1 << 0
"""Meta bit marking an entry as deleted."""


class TableLike(Protocol):
    """Anything that can report its key range and rule out keys by bloom filter."""

    def smallest(self) -> bytes: ...

    def biggest(self) -> bytes: ...

    def does_not_have(self, key: bytes) -> bool: ...


@dataclass(frozen=True)
class TableRange:
    """The key range of a table, with an optional set of keys it is known to hold.

    Without ``keys`` nothing can be ruled out, so :meth:`does_not_have`
    always answers False.
    """

    left: bytes
    right: bytes
    keys: Optional[AbstractSet[bytes]] = None

    def smallest(self) -> bytes:
        return self.left

    def biggest(self) -> bytes:
        return self.right

    def does_not_have(self, key: bytes) -> bool:
        if self.keys is None:
            return False
        return key not in self.keys


@dataclass(frozen=True)
class IteratorOptions:
    """Options controlling an iteration over the store.

    ``prefix`` narrows the tables an iterator picks up to those whose key
    range could hold that prefix. When ``prefix_is_key`` is set the prefix
    is a whole key (without timestamp) and is also checked against each
    table's bloom filter.
    """

    prefetch_values: bool = True
    prefetch_size: int = 100
    reverse: bool = False
    all_versions: bool = False
    prefix: bytes = b""
    prefix_is_key: bool = False
    internal_access: bool = False

    def pick_table(self, table: TableLike) -> bool:
        """Whether ``table`` may contain keys starting with ``prefix``."""
        prefix = self.prefix
        if not prefix:
            return True
        width = len(prefix)
        if table.smallest()[:width] > prefix:
            return False
        if table.biggest()[:width] < prefix:
            return False
        # A bloom filter lookup only works when the prefix is a complete key.
        if self.prefix_is_key and table.does_not_have(prefix):
            return False
        return True


DEFAULT_ITERATOR_OPTIONS = IteratorOptions()


def is_deleted_or_expired(meta: int, expires_at: int, now: Optional[int] = None) -> bool:
    """Whether an entry is deleted or its expiry (Unix seconds, 0 = never) has passed."""
    if meta & BIT_DELETE:
        return True
    if expires_at == 0:
        return False
    if now is None:
        now = int(time.time())
    return expires_at <= now