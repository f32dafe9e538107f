import logging
import sys
from argparse import ArgumentParser, FileType
from pathlib import Path
from typing import IO, Any, Iterable, List, Optional, Sequence, Union

from prefixtree_log import LogFormat, LogLevel, basic_config

from .map import PrefixMap
from .node import NOTHING, KeyType
from .set import PrefixSet


log = logging.getLogger(__name__)

executable = Path(sys.executable)
module_name = "prefixtree"
parser = ArgumentParser(
    prog=f"{executable.name} -m {module_name}",
    description="Load keys into a radix tree and query it",
)
parser.add_argument(
    "files", nargs="*", type=FileType("r"),
    help="Input files with one key per line, stdin when omitted",
)
parser.add_argument(
    "-s", "--separator", default=None,
    help="Split each line into key and value by this separator "
         "and build a map instead of a set",
)
parser.add_argument(
    "-b", "--bytes", action="store_true",
    help="Use UTF-8 encoded bytes as keys",
)
parser.add_argument(
    "-g", "--get", action="append", default=[], metavar="KEY",
    help="Print the value stored for KEY, may be passed multiple times",
)
parser.add_argument(
    "-d", "--dump", action="store_true",
    help="Print all entries in traversal order (default action)",
)
parser.add_argument(
    "--stats", action="store_true",
    help="Print entry count, node count and depth",
)
parser.add_argument(
    "-q", "--quiet", action="store_true",
    help="Disable logs, alias for --log-level=critical",
)
parser.add_argument(
    "-l", "--log-level", choices=LogLevel.choices(),
    default=LogLevel.default(), help="Logging level",
)
parser.add_argument(
    "-F", "--log-format", choices=LogFormat.choices(),
    default=LogFormat.default(), help="Logging format",
)
parser.add_argument(
    "--log-date-format", default=None,
    help="strftime format of log timestamps, the log format default "
         "when omitted, an empty string disables timestamps",
)

Container = Union[PrefixMap, PrefixSet]


def make_key(line: str, as_bytes: bool) -> KeyType:
    return line.encode() if as_bytes else line


def show_key(key: Any) -> str:
    return key.decode(errors="replace") if isinstance(key, bytes) else key


def load(
    files: Iterable[IO[str]], separator: Optional[str], as_bytes: bool,
) -> Container:
    container: Container = (
        PrefixSet() if separator is None else PrefixMap()
    )

    for fp in files:
        name = getattr(fp, "name", "<stream>")
        for lineno, line in enumerate(fp, 1):
            line = line.rstrip("\r\n")
            if not line:
                continue

            if isinstance(container, PrefixSet):
                container.insert(make_key(line, as_bytes))
                continue

            key, sep, value = line.partition(separator)
            if not sep:
                log.warning(
                    "%s:%d: separator %r not found, line skipped",
                    name, lineno, separator,
                )
                continue

            previous = container.insert(make_key(key, as_bytes), value)
            if previous is not None:
                log.debug(
                    "%s:%d: %r overrides %r", name, lineno, key, previous,
                )

        log.info("Loaded %r", name)

    return container


def lookup(container: Container, keys: Sequence[str], as_bytes: bool) -> int:
    missing = 0
    for raw_key in keys:
        key = make_key(raw_key, as_bytes)

        if isinstance(container, PrefixSet):
            found = container.contains(key)
            result = raw_key
        else:
            result = container.get(key, NOTHING)
            found = result is not NOTHING

        if not found:
            log.warning("Key %r not found", raw_key)
            missing += 1
            continue

        print(result)

    return 1 if missing else 0


def dump(container: Container, separator: Optional[str]) -> None:
    if isinstance(container, PrefixSet):
        for key in container:
            print(show_key(key))
        return

    for key, value in container.items():
        print(f"{show_key(key)}{separator}{value}")


def close_files(files: Iterable[IO[str]]) -> None:
    for fp in files:
        if fp is not sys.stdin:
            fp.close()


def main(argv: Optional[List[str]] = None) -> int:
    arguments = parser.parse_args(argv)

    if arguments.separator == "":
        close_files(arguments.files)
        parser.error("separator must not be empty")

    if arguments.quiet:
        arguments.log_level = LogLevel.critical.name

    basic_config(
        log_format=arguments.log_format, level=arguments.log_level,
        date_format=arguments.log_date_format,
    )

    try:
        container = load(
            arguments.files or [sys.stdin],
            arguments.separator, arguments.bytes,
        )
    finally:
        close_files(arguments.files)

    log.info("%d entries loaded", len(container))

    status = 0
    if arguments.get:
        status = lookup(container, arguments.get, arguments.bytes)

    if arguments.stats:
        print(f"entries: {len(container)}")
        print(f"nodes: {container.node_count()}")
        print(f"depth: {container.depth()}")

    if arguments.dump or not (arguments.get or arguments.stats):
        dump(container, arguments.separator)

    return status


if __name__ == "__main__":
    sys.exit(main())
