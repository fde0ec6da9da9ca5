"""
Pytest configuration and shared fixtures.
"""

import pytest

from jobboard.app import create_app
from jobboard.config import Settings
from jobboard.db import Database
from jobboard.repositories import JobRepository, UserRepository
from jobboard.schemas import JobIn


@pytest.fixture
def database(tmp_path):
    """A file-backed SQLite database with the schema created."""
    db = Database(f"sqlite:///{tmp_path / 'jobboard.db'}")
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture
def job_repository(database) -> JobRepository:
    return JobRepository(database)


@pytest.fixture
def user_repository(database) -> UserRepository:
    return UserRepository(database)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'jobboard.db'}",
        secret_key="test-secret",
        bcrypt_rounds=4,
        log_level="DEBUG",
    )


@pytest.fixture
def app(settings, database):
    app = create_app(settings, database=database)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    """Test client whose session already carries an authenticated user."""
    with client.session_transaction() as sess:
        sess['user_id'] = 1
        sess['username'] = 'alice'
    return client


@pytest.fixture
def sample_job() -> JobIn:
    return JobIn(
        title="Backend Engineer",
        company="Acme",
        type="Full-time",
        experience_level="Senior",
        salary=95000,
    )


@pytest.fixture
def job_form():
    """Form fields as a browser would post them: every value is text."""
    return {
        "title": "Data Analyst",
        "company": "Globex",
        "type": "Contract",
        "experience_level": "Junior",
        "salary": "48000",
    }


@pytest.fixture
def seeded_jobs(job_repository):
    """Three jobs with distinct salaries; returns their ids in insertion order."""
    jobs = [
        JobIn(title="Support Engineer", company="Initech", type="Full-time", experience_level="Junior", salary=52000),
        JobIn(title="Staff Engineer", company="Hooli", type="Full-time", experience_level="Staff", salary=180000),
        JobIn(title="QA Tester", company="Umbrella", type="Part-time", experience_level="Mid", salary=31000.5),
    ]
    return [job_repository.create(job) for job in jobs]
