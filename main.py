import argparse
import json
import logging
import sys
from dataclasses import asdict

from core.config_loader import get_config
from core.exceptions import ServiceException
from core.matching import MatchOrchestrator
from database.uow import matching_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_match(args) -> int:
    """Find and store matches for one job, printing the new ones."""
    config = get_config()
    overrides = {
        'distance_weight': args.distance_weight,
        'expertise_weight': args.expertise_weight,
        'availability_weight': args.availability_weight,
        'rating_weight': args.rating_weight,
        'price_weight': args.price_weight,
        'minimum_match_score': args.min_score,
        'max_matches': args.max_matches,
        'verified_only': args.verified_only,
    }

    try:
        with matching_uow() as repos:
            orchestrator = MatchOrchestrator.from_repositories(repos, config=config.matching)
            results = orchestrator.find_matches(args.job_id, overrides)
    except ServiceException as e:
        logger.error(f"Matching failed: {e}")
        return 1

    if args.json:
        print(json.dumps([asdict(r) for r in results], default=str, indent=2))
        return 0

    if not results:
        print(f"No new matches for job {args.job_id}")
        return 0

    for rank, result in enumerate(results, start=1):
        b = result.breakdown
        print(f"{rank:>2}. {result.professional_name or result.match.professional_id} "
              f"score={b.total_score:.2f} "
              f"[distance={b.distance_score:.0f} expertise={b.expertise_score:.0f} "
              f"availability={b.availability_score:.0f} rating={b.rating_score:.0f} price={b.price_score:.0f}]")
        print(f"    {b.distance_reason}; {b.expertise_reason}; {b.availability_reason}; "
              f"{b.rating_reason}; {b.price_reason}")
    return 0


def run_init_db(args) -> int:
    from database.init_db import init_db
    init_db()
    return 0


def run_serve(args) -> int:
    from web.backend.app import main as serve
    serve()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Professional/job matching service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create database tables").set_defaults(func=run_init_db)
    subparsers.add_parser("serve", help="Run the HTTP API").set_defaults(func=run_serve)

    match_parser = subparsers.add_parser("match", help="Find matches for a job")
    match_parser.add_argument("--job-id", type=int, required=True)
    match_parser.add_argument("--distance-weight", type=float)
    match_parser.add_argument("--expertise-weight", type=float)
    match_parser.add_argument("--availability-weight", type=float)
    match_parser.add_argument("--rating-weight", type=float)
    match_parser.add_argument("--price-weight", type=float)
    match_parser.add_argument("--min-score", type=float)
    match_parser.add_argument("--max-matches", type=int)
    verified = match_parser.add_mutually_exclusive_group()
    verified.add_argument("--verified-only", dest="verified_only", action="store_true", default=None)
    verified.add_argument("--include-unverified", dest="verified_only", action="store_false")
    match_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    match_parser.set_defaults(func=run_match)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
