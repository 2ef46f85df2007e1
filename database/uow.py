import contextlib
import logging

from database.database import get_session_factory
from database.repository import MatchingRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def match_uow():
    """Per-unit-of-work transaction scope.

    Yields a MatchingRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with match_uow() as repo:
            scorer = context.build_scorer(repo)
            result = scorer.score_match(candidate, job)
        # embedding cache writes commit on successful exit
    """
    session = get_session_factory()()
    try:
        repo = MatchingRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
