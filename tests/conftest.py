"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from core.matcher.embedding_store import EmbeddingProvider, InMemoryEmbeddingStore
from core.matcher.service import MatchScorer
from core.matcher.weights import WeightStore, InMemoryWeightEntryStore
from tests.mocks.matcher_mocks import MockEmbeddingService


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def embedding_service():
    """Deterministic embedding service that counts calls."""
    return MockEmbeddingService()


@pytest.fixture
def embedding_store():
    return InMemoryEmbeddingStore()


@pytest.fixture
def embedding_provider(embedding_service, embedding_store):
    return EmbeddingProvider(embedding_service, embedding_store)


@pytest.fixture
def weight_store():
    return WeightStore(InMemoryWeightEntryStore())


@pytest.fixture
def scorer(embedding_provider, weight_store):
    return MatchScorer(embeddings=embedding_provider, weight_store=weight_store)


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped fixture that automatically manages the test database container.

    Uses testcontainers to start a PostgreSQL with pgvector container before tests
    and stops it after all tests complete. Uses the external database instead
    when TEST_DATABASE_URL is set.
    """
    from tests import TEST_DB_URL, is_database_available, setup_test_database, teardown_test_database

    if TEST_DB_URL:
        if not is_database_available(TEST_DB_URL):
            pytest.skip("External database not available")
        setup_test_database(TEST_DB_URL)
        yield TEST_DB_URL
        teardown_test_database(TEST_DB_URL)
        return

    try:
        from testcontainers.postgres import PostgresContainer
    except ImportError:
        pytest.skip("testcontainers not installed and TEST_DATABASE_URL not set")

    try:
        postgres = PostgresContainer(
            image="pgvector/pgvector:pg16",
            username="testuser",
            password="testpass",
            dbname="talentmatch_test",
            port=5432
        )
        postgres.start()
    except Exception as e:
        pytest.skip(f"Could not start test database container: {e}")

    db_url = postgres.get_connection_url()
    setup_test_database(db_url)

    yield db_url

    postgres.stop()


@pytest.fixture
def db_session(test_database):
    """Session on the test database, rolled back after each test."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import Session

    engine = create_engine(test_database)
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()
        engine.dispose()
