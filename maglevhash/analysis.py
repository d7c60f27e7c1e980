"""
load and disruption numbers for a given table size.

nodes are numbered "0", "1", ... and the key hash is the integer value of a
decimal key, so key str(i) lands in slot i. that makes every slot
addressable by key
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List
from maglevhash import errors as err
from maglevhash.maglev import MaglevHash


def int_key_hash(key: bytes) -> int:
    """decimal key -> its integer value"""

    return int(key.decode())


def calculate_node_loads(assignment: Dict[int, int]) -> Dict[int, int]:
    """slot -> node becomes node -> number of slots"""

    return dict(Counter(assignment.values()))


def calculate_slot_move(before: Dict[int, int], after: Dict[int, int]) -> int:
    """number of slots whose owner changed"""

    return sum(1 for slot, node in before.items() if after.get(slot) != node)


@dataclass
class Experiment:
    """one table over numbered nodes"""

    node_count: int
    slot_count: int
    nodes: List[str] = field(init=False)
    maglev: MaglevHash = field(init=False)

    def __post_init__(self):
        self.nodes = [str(i) for i in range(0, self.node_count)]
        self.maglev = self._build()

    def _build(self) -> MaglevHash:
        return MaglevHash(
            self.nodes, slot_count=self.slot_count, key_hash_fn=int_key_hash
        )

    def slot_assignment(self) -> Dict[int, int]:
        """slot -> node number"""

        return {
            i: int(self.maglev.node(str(i))) for i in range(0, self.slot_count)
        }

    def remove_node(self, node: str):
        """drop node and rebuild"""

        if node not in self.nodes:
            raise err.UnknownNode(f"node does not exist, {node}")

        remaining = [n for n in self.nodes if n != node]
        self.maglev = self.maglev.with_nodes(remaining)
        self.nodes = remaining
        self.node_count = len(remaining)


@dataclass
class Report:
    """experiment results"""

    loads: List[int]
    slots_moved: int
    minimum_moved: int


def run(node_count: int, slot_count: int, remove: str = "1") -> Report:
    """measure loads, then slots moved after removing one node"""

    experiment = Experiment(node_count=node_count, slot_count=slot_count)
    before = experiment.slot_assignment()
    loads = calculate_node_loads(before)

    experiment.remove_node(remove)
    after = experiment.slot_assignment()

    return Report(
        loads=[loads[i] for i in sorted(loads)],
        slots_moved=calculate_slot_move(before, after),
        minimum_moved=slot_count // node_count,
    )
