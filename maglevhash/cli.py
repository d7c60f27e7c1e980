import sys
import json
import logging
from argparse import ArgumentParser
import structlog
from maglevhash import analysis, errors as err

_LOGGER = structlog.get_logger()


def _configure_logging():
    """stdout carries the report only"""

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _main():
    _configure_logging()

    parser = ArgumentParser(
        description="slot loads and slots moved after removing node 1"
    )
    parser.add_argument(
        "-n", "--node-count", help="number of nodes", type=int, required=True
    )
    parser.add_argument(
        "-m",
        "--slot-count",
        help="number of slots. must be prime and larger than node count",
        type=int,
        required=True,
    )
    args = parser.parse_args()

    try:
        report = analysis.run(args.node_count, args.slot_count)
    except (err.InvalidConfiguration, err.UnknownNode) as exc:
        _LOGGER.error("cli.invalid", error=str(exc))
        sys.exit(1)

    print(json.dumps(report.loads))
    print(report.slots_moved)
    print(report.minimum_moved)


if __name__ == "__main__":
    _main()
