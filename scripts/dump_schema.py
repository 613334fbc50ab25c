#!/usr/bin/env python3
"""
Print the PostgreSQL DDL for the animals table.

Variants:
  canonical  NOT NULL data columns, animals_pkey, id DEFAULT gen_random_uuid()
  relaxed    the old fixture: own dinos_db database, nullable columns, dinos_pkey

Usage:
  python scripts/dump_schema.py [--variant canonical|relaxed] [--owner ROLE] [--output FILE]

The owner defaults to TABLE_OWNER from the settings when they can be loaded.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.infrastructure.db.schema import CANONICAL, VARIANTS, render_schema

logger = logging.getLogger("dump_schema")

DEFAULT_OWNER = "postgres"


def _default_owner() -> str | None:
    # Settings need DATABASE_URL, which is irrelevant for a dump
    try:
        from src.config.settings import get_settings

        return get_settings().table_owner
    except ValueError:
        return DEFAULT_OWNER


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the DDL for the animals table")
    parser.add_argument("--variant", choices=VARIANTS, default=CANONICAL)
    parser.add_argument("--owner", default=None, help="Role that owns the table")
    parser.add_argument("--no-owner", action="store_true", help="Skip the OWNER TO statement")
    parser.add_argument("--output", type=Path, default=None, help="Write to a file instead of stdout")
    args = parser.parse_args(argv)

    owner = None if args.no_owner else (args.owner or _default_owner())
    ddl = render_schema(args.variant, owner=owner)

    if args.output is None:
        sys.stdout.write(ddl)
    else:
        args.output.write_text(ddl, encoding="utf-8")
        logger.info("Wrote %s schema to %s", args.variant, args.output)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    sys.exit(main())
