from argparse import ArgumentParser
from timeit import timeit
from structlog import get_logger
from maglevhash import MaglevHash, hashing, prime

LOGGER = get_logger()
HASHES = {"crc32": hashing.crc32, "xxh32": hashing.xxh32}


def main():
    """time table construction and lookups"""

    parser = ArgumentParser()
    parser.add_argument(
        "-n", "--node-count", type=int, help="number of nodes", default=10
    )
    parser.add_argument(
        "-m",
        "--slot-count",
        type=int,
        help="number of slots, defaults to the next prime after 100 * nodes",
    )
    parser.add_argument(
        "-k", "--key-hash", type=str, choices=list(HASHES), default="crc32"
    )
    parser.add_argument(
        "-z", "--lookups", type=int, help="number of lookups", default=1000000
    )

    args = parser.parse_args()
    slot_count = args.slot_count or prime.slot_count_for(args.node_count)
    nodes = [f"node{i:04d}" for i in range(0, args.node_count)]
    key_hash_fn = HASHES[args.key_hash]
    keys = [str(i).encode() for i in range(0, args.lookups)]

    LOGGER.info(
        "config",
        node_count=args.node_count,
        slot_count=slot_count,
        key_hash=args.key_hash,
        lookups=args.lookups,
    )

    def build() -> MaglevHash:
        return MaglevHash(nodes, slot_count=slot_count, key_hash_fn=key_hash_fn)

    elapsed = timeit(build, number=1)
    LOGGER.info("build.done", elapsed=elapsed)

    maglev = build()
    node = maglev.node
    elapsed = timeit(lambda: [node(key) for key in keys], number=1)
    LOGGER.info("lookup.done", elapsed=elapsed, per_lookup=elapsed / len(keys))


if __name__ == "__main__":
    main()
