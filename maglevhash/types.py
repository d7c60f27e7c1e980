from typing import Callable, List

NodeID = str
Key = bytes
Slot = int
KeyHashFn = Callable[[bytes], int]
Preferences = List[List[int]]
