"""Command line entry point: sync Atlas Search / Vector indexes from config/indexes/*.json.

Usage:
  python scripts/create_indexes.py
  python scripts/create_indexes.py --only=products,docs
  python scripts/create_indexes.py --dry-run
  python scripts/create_indexes.py --force-recreate
  python scripts/create_indexes.py --show products

Env: MONGODB_URI, MONGODB_DB (prompted for when unset).
"""
import argparse
import logging
import sys
from typing import Callable, Optional

from config import get_mongo_client, load_mongo_settings, resolve_setting
from .reconcile import reconcile, show_index_definitions
from .specs import default_specs, filter_specs, parse_only

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Create or update Atlas Search / Vector indexes from JSON files.")
    p.add_argument("--only", metavar="COLLECTIONS", help="Comma-separated collection names to process")
    p.add_argument("--dry-run", action="store_true", help="Print the intended actions without changing any index")
    p.add_argument("--force-recreate", action="store_true", help="Drop and recreate indexes that already exist")
    p.add_argument(
        "--show",
        nargs="?",
        const="",
        metavar="COLLECTION",
        help="Print the existing index definitions of a collection instead of syncing (prompts if omitted; not combinable with sync flags)",
    )
    p.add_argument("--config-dir", help="Directory containing config/indexes/ (default: current directory)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def run(args: argparse.Namespace, db, ask: Callable[[str], str] = input) -> None:
    if args.show is not None:
        collection = args.show or resolve_setting("COLLECTION", prompt="Enter collection name: ", environ={}, ask=ask)
        show_index_definitions(db, collection)
        return

    specs = filter_specs(default_specs(), parse_only(args.only))
    if not specs:
        print(f"No index specs match --only={args.only}")
        return
    results = reconcile(
        db,
        specs,
        dry_run=args.dry_run,
        force_recreate=args.force_recreate,
        base_dir=args.config_dir,
    )
    prefix = "[dry-run] " if args.dry_run else ""
    print(f"{prefix}Done. Processed {len(results)} index spec(s).")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.show is not None and (args.only is not None or args.dry_run or args.force_recreate):
        parser.error("--show cannot be combined with --only, --dry-run or --force-recreate")
    return args


def main(argv: Optional[list[str]] = None, ask: Callable[[str], str] = input) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = None
    try:
        settings = load_mongo_settings(ask=ask)
        client = get_mongo_client(settings.uri)
        run(args, client[settings.db_name], ask=ask)
    except Exception:
        logger.exception("Index sync failed")
        return 1
    finally:
        if client is not None:
            client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
