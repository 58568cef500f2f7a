import os
import pytest
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Set required environment variables for testing
os.environ["API_V1_STR"] = "/api/v1"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from app.main import app
from app.database import get_db, enable_sqlite_foreign_keys
from app.models import Base, Household, Role, User

TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """
    Create a fresh in-memory database for each test.

    Identities therefore start at 1 in every test.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a database session shared by the test and the app."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    def override_get_db():
        try:
            yield session
        finally:
            pass  # Closed after the test

    app.dependency_overrides[get_db] = override_get_db
    yield session

    # Cleanup
    session.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(db_session):
    """Create a FastAPI TestClient with database session override."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def test_role(db_session):
    role = Role(name="parent", description="Manages the household budget")
    db_session.add(role)
    db_session.commit()
    db_session.refresh(role)
    return role


@pytest.fixture
def test_household(db_session):
    household = Household(name="Smiths", total_balance=Decimal("1000"), invitation_code="SMITHS01")
    db_session.add(household)
    db_session.commit()
    db_session.refresh(household)
    return household


@pytest.fixture
def test_user(db_session, test_role, test_household):
    """Create a user who is a member of test_household."""
    user = User(name="Alice", role_id=test_role.id, household_id=test_household.id)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
