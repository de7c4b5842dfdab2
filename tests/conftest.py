"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from random import Random
from typing import Any, Generator, Sequence

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.wordle.dictionary import WordList

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# "apple" first: FirstChoice picks it as the solution
TEST_WORDS = ["apple", "again", "alarm", "crane", "dates", "elder", "plate"]


class FirstChoice(Random):
    """Deterministic 'random' source: always picks the first candidate."""

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[0]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of the store independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def word_list() -> WordList:
    return WordList(TEST_WORDS)


@pytest.fixture
def first_choice() -> Random:
    return FirstChoice()
