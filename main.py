import logging
import sys
import json
import argparse
from typing import Any, List

from core.app_context import AppContext
from core.config_loader import load_config
from core.matcher.models import CandidateProfile, JobProfile
from database.database import configure as configure_database
from database.uow import match_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_json(path: str) -> Any:
    """Load a JSON document, exiting with a message when it is unreadable."""
    logger.info(f"Loading {path}")
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"File not found: {path}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        sys.exit(1)


def load_profiles(path: str, profile_cls) -> List[Any]:
    data = load_json(path)
    if isinstance(data, dict):
        data = [data]
    return [profile_cls.from_dict(item) for item in data]


def run_batch(context: AppContext, args) -> int:
    """Score one candidate against many jobs (or one job against many candidates)."""
    with match_uow() as repo:
        matcher = context.build_batch_matcher(repo)

        if args.candidate:
            candidate = load_profiles(args.candidate, CandidateProfile)[0]
            jobs = load_profiles(args.jobs, JobProfile)
            summary = matcher.match_candidate_against_jobs(candidate, jobs)
        else:
            job = load_profiles(args.job, JobProfile)[0]
            candidates = load_profiles(args.candidates, CandidateProfile)
            summary = matcher.match_job_against_candidates(job, candidates)

    for candidate_id, job_id, score in summary.matches:
        print(f"{candidate_id}\t{job_id}\t{score}")
    return 0 if summary.failed == 0 else 2


def run_feedback(context: AppContext, args) -> int:
    with match_uow() as repo:
        store = context.build_weight_store(repo)
        scheme = args.scheme or context.config.matching.weight_scheme
        adjusted = store.apply_feedback(args.type, args.factors, scheme_id=scheme)

    for entry in adjusted:
        print(f"{entry.factor}\t{entry.weight}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="TalentMatch Driver")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('init-db', help='Create the pgvector extension and tables')

    batch = sub.add_parser('batch', help='Batch-score and persist matches')
    group = batch.add_mutually_exclusive_group(required=True)
    group.add_argument('--candidate', type=str, help='Candidate JSON file (scored against --jobs)')
    group.add_argument('--job', type=str, help='Job JSON file (scored against --candidates)')
    batch.add_argument('--jobs', type=str, help='JSON list of jobs')
    batch.add_argument('--candidates', type=str, help='JSON list of candidates')

    feedback = sub.add_parser('feedback', help='Apply accept/reject feedback to weights')
    feedback.add_argument('--type', choices=['accept', 'reject'], required=True)
    feedback.add_argument('--factors', nargs='+', choices=['semantic', 'keyword', 'experience'], required=True)
    feedback.add_argument('--scheme', type=str, default=None)

    args = parser.parse_args()

    if args.command == 'batch':
        if args.candidate and not args.jobs:
            parser.error('--candidate requires --jobs')
        if args.job and not args.candidates:
            parser.error('--job requires --candidates')

    config = load_config(args.config)
    # Every command talks to the database named by --config
    configure_database(config.database.url)

    if args.command == 'init-db':
        from database.init_db import init_db
        init_db()
        return 0

    context = AppContext.build(config)

    if args.command == 'batch':
        return run_batch(context, args)
    return run_feedback(context, args)


if __name__ == "__main__":
    sys.exit(main())
