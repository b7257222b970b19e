"""
Shared fixtures for the test suite.
"""
import pytest
from sqlalchemy.orm import sessionmaker

from eternal_quest.database import make_engine, init_db
from eternal_quest.modules.goals import GoalLedger, create_goal
from eternal_quest.modules.quests import Quest, User
from eternal_quest.services import GoalService, QuestService


@pytest.fixture
def db_session():
    """In-memory SQLite session with history tables created"""
    engine = make_engine("sqlite:///:memory:")
    init_db(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def goals_file(tmp_path):
    return tmp_path / "goals.txt"


@pytest.fixture
def ledger():
    return GoalLedger()


@pytest.fixture
def goal_service(goals_file):
    return GoalService(goals_file=str(goals_file))


@pytest.fixture
def user():
    return User("oged")


@pytest.fixture
def quest_service(user):
    return QuestService(user)


def write_goal_file(path, *lines):
    """Write raw record lines, each newline-terminated"""
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


def make_ledger(*specs):
    """Build a ledger from (variant, name, points) triples"""
    return GoalLedger(create_goal(variant, name, points) for variant, name, points in specs)


def make_quest(name="Read a Book", reward=300):
    return Quest(name, reward, "Read a book on a topic of interest.")
