from threading import Lock
from typing import Iterable, Union
from structlog import get_logger
from maglevhash import const, errors as err, hashing
from maglevhash.maglev import MaglevHash
from maglevhash.types import Key, KeyHashFn, NodeID

_LOGGER = get_logger()


class Router:
    """
    publishes the current MaglevHash. rebuilds happen off to the side and the
    finished table replaces the old reference in one assignment, so lookups
    never take the lock
    """

    def __init__(
        self,
        nodes: Iterable[NodeID],
        slot_count: int = const.DEFAULT_SLOT_COUNT,
        key_hash_fn: KeyHashFn = hashing.crc32,
    ):
        self.lock = Lock()
        self.logger = _LOGGER.bind(slot_count=slot_count)
        self._maglev = MaglevHash(
            nodes, slot_count=slot_count, key_hash_fn=key_hash_fn
        )

    @property
    def maglev(self) -> MaglevHash:
        """current snapshot"""

        return self._maglev

    def lookup(self, key: Union[Key, str]) -> NodeID:
        """find whos responsible for a key"""

        return self._maglev.node(key)

    def update(self, nodes: Iterable[NodeID]) -> MaglevHash:
        """rebuild for a new node set and publish it"""

        with self.lock:
            return self._rebuild(set(nodes))

    def add_node(self, node: NodeID) -> MaglevHash:
        """add node and rebuild"""

        with self.lock:
            return self._rebuild(set(self._maglev.nodes) | {node})

    def remove_node(self, node: NodeID) -> MaglevHash:
        """remove node and rebuild"""

        with self.lock:
            current = set(self._maglev.nodes)

            if node not in current:
                raise err.UnknownNode(f"node does not exist, {node}")

            return self._rebuild(current - {node})

    def _rebuild(self, nodes: set) -> MaglevHash:
        """caller holds the lock"""

        old = self._maglev

        try:
            new = old.with_nodes(nodes)
        except err.InvalidConfiguration as exc:
            self.logger.warning("routing.rebuild.failed", error=str(exc))
            raise

        self._maglev = new
        self.logger.info(
            "routing.rebuild",
            added=sorted(set(new.nodes) - set(old.nodes)),
            removed=sorted(set(old.nodes) - set(new.nodes)),
            node_count=new.node_count,
        )

        return new
