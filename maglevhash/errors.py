class InvalidConfiguration(Exception):
    """table cannot be built from the given settings"""


class InvalidSlotCount(InvalidConfiguration):
    """slot count must be prime"""


class EmptyNodeSet(InvalidConfiguration):
    """no nodes after dedup"""


class TooManyNodes(InvalidConfiguration):
    """more nodes than slots"""


class UnknownNode(Exception):
    """node is not a member"""
