# smallest prime >= 10,000. fine for up to ~100 nodes
DEFAULT_SLOT_COUNT = 10007
DEFAULT_SLOT_FACTOR = 100
OFFSET_SUFFIX = ":offset"
SKIP_SUFFIX = ":skip"
UNASSIGNED = -1
MAX_UINT_32 = 2 ** 32 - 1
