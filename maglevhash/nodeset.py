from typing import Iterable, Tuple
from maglevhash import errors as err
from maglevhash.types import NodeID


def normalize(nodes: Iterable[NodeID], slot_count: int) -> Tuple[NodeID, ...]:
    """dedup and sort so the table depends on node membership only"""

    unique = set()

    for node in nodes:
        if not isinstance(node, str):
            raise TypeError(f"node id must be str, got {type(node).__name__}")
        unique.add(node)

    if not unique:
        raise err.EmptyNodeSet("node set is empty")

    if len(unique) > slot_count:
        raise err.TooManyNodes(
            f"more nodes than slots, {len(unique)} > {slot_count}"
        )

    return tuple(sorted(unique))
