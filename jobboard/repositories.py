import logging
from enum import Enum
from typing import List, Optional

from jobboard.db import Database, jobs_table, users_table
from jobboard.schemas import Job, JobIn, UserOut

logger = logging.getLogger(__name__)


class SortOrder(str, Enum):
    ASC = 'ASC'
    DESC = 'DESC'

    @classmethod
    def parse(cls, value) -> 'SortOrder':
        """Map free text such as a query-string value onto a member, defaulting to ASC."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.ASC


_SELECT_JOBS = 'SELECT id, title, company, type, experience_level, salary FROM jobs'

# Fixed statements per direction; the direction is never formatted into SQL.
_SORTED_BY_SALARY = {
    SortOrder.ASC: _SELECT_JOBS + ' ORDER BY salary ASC',
    SortOrder.DESC: _SELECT_JOBS + ' ORDER BY salary DESC',
}


class JobRepository:
    """CRUD access to job postings, one statement per call."""

    def __init__(self, db: Database):
        self.db = db

    def create(self, job: JobIn) -> int:
        result = self.db.run(jobs_table.insert().values(**job.model_dump()))
        logger.debug("Inserted job %s", result['lastID'])
        return result['lastID']

    def get_all(self) -> List[Job]:
        return [Job(**row) for row in self.db.all(_SELECT_JOBS)]

    def get_by_id(self, job_id) -> Optional[Job]:
        # job_id may arrive as path text; the driver binds it as given.
        row = self.db.get(_SELECT_JOBS + ' WHERE id = :id', {'id': job_id})
        return Job(**row) if row else None

    def get_all_sorted_by_salary(self, order: SortOrder = SortOrder.ASC) -> List[Job]:
        query = _SORTED_BY_SALARY[SortOrder.parse(order)]
        return [Job(**row) for row in self.db.all(query)]

    def update(self, job_id, job: JobIn) -> bool:
        result = self.db.run(
            '''
            UPDATE jobs
            SET title = :title, company = :company, type = :type,
                experience_level = :experience_level, salary = :salary
            WHERE id = :id
            ''',
            {**job.model_dump(), 'id': job_id},
        )
        if not result['changes']:
            logger.info("Update matched no job with id %s", job_id)
        return True

    def delete(self, job_id) -> bool:
        result = self.db.run('DELETE FROM jobs WHERE id = :id', {'id': job_id})
        if not result['changes']:
            logger.info("Delete matched no job with id %s", job_id)
        return True


class UserRepository:
    def __init__(self, db: Database):
        self.db = db

    def create(self, username: str, password_hash: str) -> int:
        result = self.db.run(users_table.insert().values(username=username, password=password_hash))
        return result['lastID']

    def get_by_username(self, username: str) -> Optional[dict]:
        return self.db.get(
            'SELECT id, username, password FROM users WHERE username = :username',
            {'username': username},
        )

    def get_all(self) -> List[UserOut]:
        # Never selects the password hash.
        return [UserOut(**row) for row in self.db.all('SELECT id, username FROM users')]
