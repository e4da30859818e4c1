"""
Shared fixtures: in-memory database, API client and model factories
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import timedelta

import factory
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recruitment.auth.principal import Principal
from recruitment.auth.service import create_access_token, get_password_hash
from recruitment.core.config import settings
from recruitment.core.database import Base, get_db
from recruitment.core.timeutils import utcnow
from recruitment.main import app
from recruitment.models import (
    Candidate,
    CandidateStatus,
    Interview,
    InterviewStatus,
    Job,
    JobStatus,
    RoleName,
    Skill,
    User,
    UserRole,
    UserStatus,
)

TEST_PASSWORD = "password123"
TEST_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ============================================================================
# FACTORIES
# ============================================================================

class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        sqlalchemy_session_persistence = "commit"


class UserFactory(BaseFactory):
    class Meta:
        model = User

    class Params:
        role = RoleName.CANDIDATE

    full_name = factory.Sequence(lambda n: f"User {n}")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    username = factory.Sequence(lambda n: f"user{n}")
    hashed_password = TEST_PASSWORD_HASH
    status = UserStatus.ACTIVE.value
    role_links = factory.LazyAttribute(lambda o: [UserRole(role=o.role)])


class CandidateFactory(BaseFactory):
    class Meta:
        model = Candidate

    user = factory.SubFactory(UserFactory, role=RoleName.CANDIDATE)
    experience_years = 3
    status = CandidateStatus.APPLIED.value
    created_at = factory.LazyFunction(utcnow)


class SkillFactory(BaseFactory):
    class Meta:
        model = Skill

    name = factory.Sequence(lambda n: f"Skill {n}")


class JobFactory(BaseFactory):
    class Meta:
        model = Job

    title = factory.Sequence(lambda n: f"Engineer {n}")
    department = "Engineering"
    description = "Build and run services"
    min_experience = "2 years"
    location = "Remote"
    status = JobStatus.OPEN.value
    created_by_user = factory.SubFactory(UserFactory, role=RoleName.RECRUITER)
    created_at = factory.LazyFunction(utcnow)


class InterviewFactory(BaseFactory):
    class Meta:
        model = Interview

    candidate = factory.SubFactory(CandidateFactory)
    job = factory.SubFactory(JobFactory)
    scheduled_date = factory.LazyFunction(lambda: utcnow() + timedelta(days=2))
    interview_type = "Technical"
    round_no = 1
    status = InterviewStatus.SCHEDULED.value
    created_at = factory.LazyFunction(utcnow)


ALL_FACTORIES = (UserFactory, CandidateFactory, SkillFactory, JobFactory, InterviewFactory)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def db():
    """Fresh schema per test"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    for factory_class in ALL_FACTORIES:
        factory_class._meta.sqlalchemy_session = session
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    return _headers


@pytest.fixture
def principal_for():
    return Principal.from_user


@pytest.fixture
def admin(db):
    return UserFactory(full_name="Ada Admin", role=RoleName.ADMIN)


@pytest.fixture
def hr(db):
    return UserFactory(full_name="Harriet HR", role=RoleName.HR)


@pytest.fixture
def recruiter(db):
    return UserFactory(full_name="Rita Recruiter", role=RoleName.RECRUITER)


@pytest.fixture
def interviewer(db):
    return UserFactory(full_name="Ivan Interviewer", role=RoleName.INTERVIEWER)


@pytest.fixture
def reviewer(db):
    return UserFactory(full_name="Rae Reviewer", role=RoleName.REVIEWER)


@pytest.fixture
def candidate(db):
    return CandidateFactory(user__full_name="Casey Candidate", experience_years=4)
