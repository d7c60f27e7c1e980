from typing import List
from maglevhash import const, errors as err
from maglevhash.types import Preferences


def build_lookup(preferences: Preferences, slot_count: int) -> List[int]:
    """
    nodes take turns claiming their next free preferred slot until every slot
    is taken. lookup[s] = i means slot s belongs to node i
    """

    if not preferences:
        raise err.EmptyNodeSet("no preference lists")

    n = len(preferences)
    entry = [const.UNASSIGNED] * slot_count
    next_ = [0] * n
    k = 0

    while True:
        for i in range(0, n):
            perm = preferences[i]
            c = perm[next_[i]]

            while entry[c] >= 0:
                next_[i] += 1
                c = perm[next_[i]]

            entry[c] = i
            next_[i] += 1
            k += 1

            if k == slot_count:
                return entry
