import logging
from typing import Any, Optional

from sqlalchemy import select, update

from database.models import Job, JobStatus
from database.repositories.base import BaseRepository
from core.exceptions import JobNotFoundError

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    def get_job(self, job_id: Any) -> Job:
        job = self.db.get(Job, job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    def job_exists(self, job_id: Any) -> bool:
        stmt = select(Job.id).where(Job.id == job_id)
        return self.db.execute(stmt).first() is not None

    def set_job_status(
        self,
        job_id: Any,
        status: JobStatus,
        expected_status: Optional[JobStatus] = None
    ) -> bool:
        """Move a job to ``status``.

        With ``expected_status`` the update only applies while the job is still
        in that state, so racing callers transition it at most once. Setting a
        job to the status it already has is a no-op.

        Returns:
            True if the row changed, False otherwise
        """
        stmt = update(Job).where(Job.id == job_id, Job.status != status)
        if expected_status is not None:
            stmt = stmt.where(Job.status == expected_status)
        result = self.db.execute(stmt.values(status=status))

        if result.rowcount == 0:
            if not self.job_exists(job_id):
                raise JobNotFoundError(job_id)
            return False

        logger.info(f"Job {job_id} status set to {status.value}")
        return True
