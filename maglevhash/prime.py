from operator import index
from sympy import isprime, nextprime
from maglevhash import const


def is_prime(n: int) -> bool:
    """true iff n is a prime number. non-integers are never prime"""

    if isinstance(n, bool):
        return False

    try:
        n = index(n)
    except TypeError:
        return False

    return bool(isprime(n))


def next_prime(n: int) -> int:
    """smallest prime strictly larger than n"""

    return int(nextprime(n))


def slot_count_for(node_count: int, factor: int = const.DEFAULT_SLOT_FACTOR) -> int:
    """
    size a table for node_count nodes. slots per node bounds the load skew,
    so M should be orders of magnitude larger than N
    """

    return next_prime(max(node_count, 1) * factor)
