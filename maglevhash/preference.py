"""
per node permutation of the slot space via double hashing.

offset and skip come from two md5 digests of the node id. skip is in
[1, M - 1] and M is prime, so offset + j * skip (mod M) hits every slot
exactly once for j in [0, M)
"""

from hashlib import md5
from typing import List, Sequence
from maglevhash import const
from maglevhash.types import NodeID, Preferences


def _md5_mod(string: str, mod: int) -> int:
    """md5 of string as a big int, modulo mod"""

    return int(md5(string.encode()).hexdigest(), 16) % mod


def offset(node: NodeID, slot_count: int) -> int:
    """first preferred slot"""

    return _md5_mod(f"{node}{const.OFFSET_SUFFIX}", slot_count)


def skip(node: NodeID, slot_count: int) -> int:
    """stride between preferences, never 0"""

    return _md5_mod(f"{node}{const.SKIP_SUFFIX}", slot_count - 1) + 1


def build_preference(node: NodeID, slot_count: int) -> List[int]:
    """preference list for one node"""

    off = offset(node, slot_count)
    stride = skip(node, slot_count)

    return [(off + j * stride) % slot_count for j in range(0, slot_count)]


def build_preferences(nodes: Sequence[NodeID], slot_count: int) -> Preferences:
    """preferences[i][j] = k means slot k is the jth choice of nodes[i]"""

    return [build_preference(node, slot_count) for node in nodes]
