"""Rank personas against HOST roles

Loads HOST and persona exports (JSON lists of {"id", "name", "tags"}) and
prints, for each HOST, the personas that can fill it.

Usage:
    python scripts/rank_personas.py
    python scripts/rank_personas.py --host host_042 --all --explain
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger
from nexus.config import settings
from nexus.data.loader import load_entities
from nexus.matching import MatchingEngine, get_badge


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank personas for HOST roles")
    parser.add_argument("--hosts", default=str(settings.hosts_path))
    parser.add_argument("--personas", default=str(settings.personas_path))
    parser.add_argument("--host", default=None, help="Only rank this HOST id")
    parser.add_argument("--all", action="store_true", help="Include incompatible personas")
    parser.add_argument("--explain", action="store_true", help="Print a breakdown per pairing")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    try:
        hosts = load_entities(args.hosts)
        personas = load_entities(args.personas)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    if args.host:
        hosts = [h for h in hosts if h.identifier == args.host]
        if not hosts:
            logger.error(f"HOST {args.host!r} not found in {args.hosts}")
            return 1

    engine = MatchingEngine()

    for host in hosts:
        if args.all:
            ranked = engine.rank_all(host, personas)
        else:
            ranked = engine.find_compatible_candidates(host, personas)

        logger.info("=" * 60)
        logger.info(f"HOST {host.identifier} ({', '.join(host.tags)})")
        logger.info("=" * 60)

        if not ranked:
            logger.info("No compatible personas")
            continue

        for match in ranked:
            badge = get_badge(match.result.level)
            logger.info(
                f"{badge.glyph} {match.result.score:3d}  {match.entity.display_name or match.entity.identifier}"
                f"  [{badge.label}]"
            )
            if args.explain:
                logger.info("\n" + engine.explain_match(host, match.entity))

    return 0


if __name__ == "__main__":
    sys.exit(main())
