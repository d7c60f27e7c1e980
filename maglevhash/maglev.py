"""
Maglev hashing, from "Maglev: A Fast and Reliable Software Network Load
Balancer" (Eisenbud et al., NSDI 2016).

The key space is broken into a prime number of slots and every slot is
assigned to a node. The table is near perfectly balanced (slot counts per
node differ by at most one) and a membership change reassigns close to M/N
slots.

    mh = new(["B0", "B1"])
    mh.node(b"key1")

A MaglevHash never changes after construction. When membership changes,
build a new one and swap the reference (see routing.Router).
"""

from __future__ import annotations
from collections import Counter
from operator import index
from typing import Any, Dict, Iterable, Tuple, Union
from structlog import get_logger
from maglevhash import const, errors as err, hashing, prime
from maglevhash.lookup import build_lookup
from maglevhash.nodeset import normalize
from maglevhash.preference import build_preferences
from maglevhash.types import Key, KeyHashFn, NodeID, Slot

_LOGGER = get_logger()


class MaglevHash:
    """immutable slot -> node lookup table"""

    __slots__ = ("_slot_count", "_nodes", "_table", "_key_hash_fn")

    def __init__(
        self,
        nodes: Iterable[NodeID],
        slot_count: int = const.DEFAULT_SLOT_COUNT,
        key_hash_fn: KeyHashFn = hashing.crc32,
    ):
        if not prime.is_prime(slot_count):
            raise err.InvalidSlotCount(
                f"number of slots must be a prime number, {slot_count}"
            )

        if not callable(key_hash_fn):
            raise TypeError("key_hash_fn must be callable")

        slot_count = index(slot_count)
        normalized = normalize(nodes, slot_count)
        preferences = build_preferences(normalized, slot_count)

        object.__setattr__(self, "_slot_count", slot_count)
        object.__setattr__(self, "_nodes", normalized)
        object.__setattr__(self, "_key_hash_fn", key_hash_fn)
        object.__setattr__(
            self, "_table", tuple(build_lookup(preferences, slot_count))
        )

        _LOGGER.debug(
            "maglev.build", slot_count=slot_count, node_count=len(normalized)
        )

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaglevHash):
            return NotImplemented

        return (
            self._slot_count == other._slot_count
            and self._nodes == other._nodes
            and self._key_hash_fn is other._key_hash_fn
            and self._table == other._table
        )

    def __hash__(self) -> int:
        return hash((self._slot_count, self._nodes, self._table))

    def __repr__(self) -> str:
        return (
            f"MaglevHash(slot_count={self._slot_count}, "
            f"nodes={list(self._nodes)!r})"
        )

    @property
    def slot_count(self) -> int:
        """M"""

        return self._slot_count

    @property
    def nodes(self) -> Tuple[NodeID, ...]:
        """sorted, deduplicated node ids"""

        return self._nodes

    @property
    def node_count(self) -> int:
        """N"""

        return len(self._nodes)

    @property
    def table(self) -> Tuple[int, ...]:
        """table[s] is the index into nodes owning slot s"""

        return self._table

    @property
    def key_hash_fn(self) -> KeyHashFn:
        return self._key_hash_fn

    def slot(self, key: Union[Key, str]) -> Slot:
        """slot a key hashes to"""

        return self._key_hash_fn(hashing.to_bytes(key)) % self._slot_count

    def node(self, key: Union[Key, str]) -> NodeID:
        """node responsible for key"""

        return self._nodes[self._table[self.slot(key)]]

    def loads(self) -> Dict[NodeID, int]:
        """number of slots assigned to each node"""

        counts = Counter(self._table)
        return {node: counts[i] for i, node in enumerate(self._nodes)}

    def with_nodes(self, nodes: Iterable[NodeID]) -> MaglevHash:
        """new table over a different node set, same slot count and key hash"""

        return MaglevHash(
            nodes, slot_count=self._slot_count, key_hash_fn=self._key_hash_fn
        )


def new(nodes: Iterable[NodeID]) -> MaglevHash:
    """default slot count, crc32 key hash"""

    return MaglevHash(nodes)


def new_with_table_size(
    slot_count: int, nodes: Iterable[NodeID], key_hash_fn: KeyHashFn
) -> MaglevHash:
    """explicit slot count and key hash"""

    return MaglevHash(nodes, slot_count=slot_count, key_hash_fn=key_hash_fn)
