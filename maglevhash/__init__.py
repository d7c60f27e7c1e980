from .maglev import MaglevHash, new, new_with_table_size
from .routing import Router
from .errors import (
    InvalidConfiguration,
    InvalidSlotCount,
    EmptyNodeSet,
    TooManyNodes,
    UnknownNode,
)

__all__ = [
    "MaglevHash",
    "new",
    "new_with_table_size",
    "Router",
    "InvalidConfiguration",
    "InvalidSlotCount",
    "EmptyNodeSet",
    "TooManyNodes",
    "UnknownNode",
]
