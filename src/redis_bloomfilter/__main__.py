import argparse
import logging
import sys

from redis_bloomfilter import (
    RICH_AVAIL,
    InvalidArgument,
    RedisBloomFilter,
    StoreSettings,
    connect,
    console,
    version,
)
from redis_bloomfilter.config.settings import (
    DEFAULT_ERROR_RATE,
    DEFAULT_KEY_NAME,
    FilterConfig,
)
from redis_bloomfilter.hashing.engines import HashEngine

if RICH_AVAIL:
    from rich.logging import RichHandler
    from rich.table import Table


def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    if debug and RICH_AVAIL:
        logging.basicConfig(
            level=level, format="%(message)s", handlers=[RichHandler()]
        )
    else:
        logging.basicConfig(level=level)


def _show_info(config: FilterConfig) -> None:
    if RICH_AVAIL:
        table = Table(title="redis-bloomfilter - Filter Parameters")
        table.add_column("Parameter", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Key", config.key_name)
        table.add_row("Capacity (n)", str(config.capacity))
        table.add_row("Error rate (p)", f"{config.error_rate:g}")
        table.add_row("Bits (m)", str(config.bit_count))
        table.add_row("Hashes (k)", str(config.hash_count))
        table.add_row("Hash engine", config.hash_engine.value)
        table.add_row("Memory", f"{(config.bit_count + 7) // 8} bytes")
        console.print(table)
    else:
        print("redis-bloomfilter - Filter Parameters")
        print(f"  Key: {config.key_name}")
        print(f"  Capacity: {config.capacity}")
        print(f"  Error rate: {config.error_rate:g}")
        print(f"  Bits: {config.bit_count}")
        print(f"  Hashes: {config.hash_count}")
        print(f"  Hash engine: {config.hash_engine.value}")


def _report(element: str, present: bool) -> None:
    if RICH_AVAIL:
        status = (
            "[green]possibly present[/green]"
            if present
            else "[red]absent[/red]"
        )
        console.print(f"{element}: {status}")
    else:
        print(f"{element}: {'possibly present' if present else 'absent'}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="redis-bloomfilter - Bloom filter on a shared Redis bitmap",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\nExamples:\n  redis-bloomfilter --capacity 10000 info\n  redis-bloomfilter --capacity 10000 insert alice bob\n  redis-bloomfilter --capacity 10000 check alice carol\n  redis-bloomfilter --capacity 10000 clear\n        ",
    )
    parser.add_argument(
        "--capacity", type=int, default=1000, help="Expected number of elements"
    )
    parser.add_argument(
        "--error-rate",
        type=float,
        default=DEFAULT_ERROR_RATE,
        help="Target false-positive rate",
    )
    parser.add_argument(
        "--key-name", default=DEFAULT_KEY_NAME, help="Redis key of the bitmap"
    )
    parser.add_argument(
        "--hash-engine",
        default=HashEngine.MD5.value,
        choices=[e.value for e in HashEngine],
        help="Hash family used to derive bit indices",
    )
    parser.add_argument(
        "--redis-url", default=None, help="Redis URL (default: $REDIS_URL)"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("info", help="Show derived filter parameters")
    insert_parser = subparsers.add_parser("insert", help="Insert elements")
    insert_parser.add_argument("elements", nargs="+", help="Elements to add")
    check_parser = subparsers.add_parser(
        "check", help="Check elements for membership"
    )
    check_parser.add_argument("elements", nargs="+", help="Elements to check")
    subparsers.add_parser("clear", help="Delete the backing bitmap")
    subparsers.add_parser("version", help="Show version")
    args = parser.parse_args()
    _configure_logging(args.debug)

    if args.command == "version":
        print(version())
        return
    try:
        config = FilterConfig.create(
            args.capacity,
            error_rate=args.error_rate,
            key_name=args.key_name,
            hash_engine=args.hash_engine,
        )
        if args.command not in ("info", None):
            settings = StoreSettings()
            if args.redis_url:
                settings.url = args.redis_url
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)
    if args.command == "info" or args.command is None:
        _show_info(config)
        return

    bf = RedisBloomFilter(
        config.capacity,
        error_rate=config.error_rate,
        key_name=config.key_name,
        hash_engine=config.hash_engine,
        store=connect(settings),
    )
    if args.command == "insert":
        for element in args.elements:
            bf.insert(element)
        print(f"Inserted {len(args.elements)} element(s) into {bf.key_name}")
    elif args.command == "check":
        results = [(e, bf.include(e)) for e in args.elements]
        for element, present in results:
            _report(element, present)
        sys.exit(0 if all(p for _, p in results) else 1)
    elif args.command == "clear":
        bf.clear()
        print(f"Cleared {bf.key_name}")


if __name__ == "__main__":
    main()
