"""
User Repository Implementation

Repository for user accounts, profiles and saved jobs.
"""

from typing import List, Optional, Tuple, Type
from datetime import datetime, timezone

from sqlalchemy import select, func, delete
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobboard.core.config import get_settings
from jobboard.core.exceptions import (
    DatabaseException,
    EmailAlreadyRegisteredException,
    JobNotFoundException,
    ProfileNotFoundException,
    SavedJobsLimitExceededException,
    UserNotFoundException,
)
from jobboard.models.job import Job
from jobboard.models.user import User, UserProfile, SavedJob
from jobboard.repositories.base_repository import BaseRepository
from jobboard.schemas.common import PaginationMeta
from jobboard.schemas.user import (
    SavedJobEmployer,
    SavedJobItem,
    SavedJobSummary,
    UserProfileUpdate,
)
from jobboard.utils.logger import get_logger, log_database_operation
from jobboard.utils.pagination import build_pagination_meta

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user database operations."""

    def __init__(self, session, saved_jobs_limit: Optional[int] = None):
        super().__init__(session)
        self.saved_jobs_limit = (
            get_settings().SAVED_JOBS_LIMIT if saved_jobs_limit is None else saved_jobs_limit
        )

    @property
    def model(self) -> Type[User]:
        return User

    async def find_by_email(self, email: str, include_deleted: bool = False) -> Optional[User]:
        """Find a user by email. Deleted accounts are skipped unless asked for."""
        try:
            query = select(User).where(func.lower(User.email) == email.lower())
            if not include_deleted:
                query = query.where(User.status != "deleted")
            result = await self.session.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error finding user by email: {e}")
            raise DatabaseException("Failed to look up user by email") from e

    async def find_by_id_with_profile(self, user_id: int) -> Optional[User]:
        """Find an active user together with their profile."""
        try:
            query = (
                select(User)
                .options(selectinload(User.profile))
                .where(User.id == user_id, User.status == "active")
                .execution_options(populate_existing=True)
            )
            result = await self.session.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error loading user {user_id} with profile: {e}")
            raise DatabaseException(f"Failed to load user {user_id}") from e

    async def create_user(
        self,
        email: str,
        full_name: str,
        password_hash: str,
        role: str = "user",
    ) -> User:
        """Create a user together with an empty profile."""
        try:
            user = User(
                email=email,
                full_name=full_name,
                password_hash=password_hash,
                role=role,
            )
            user.profile = UserProfile()
            self.session.add(user)
            await self.session.flush()
        except SQLAlchemyError as e:
            if isinstance(e, IntegrityError) and "email" in str(e.orig).lower():
                logger.info("Email already registered", email=email)
                raise EmailAlreadyRegisteredException(email) from e
            logger.error(f"Error creating user: {e}")
            raise DatabaseException("Failed to create user") from e

        log_database_operation("create", "users", record_id=user.id)
        return await self.find_by_id_with_profile(user.id)

    async def is_active_user(self, user_id: int) -> bool:
        try:
            result = await self.session.execute(
                select(User.id).where(User.id == user_id, User.status == "active")
            )
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking status of user {user_id}: {e}")
            raise DatabaseException(f"Failed to load user {user_id}") from e

    async def update_last_login(self, user_id: int) -> None:
        user = await self.get_by_id(user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        user.last_login_at = datetime.now(timezone.utc)
        await self.session.flush()

    async def get_profile(self, user_id: int) -> Optional[UserProfile]:
        try:
            result = await self.session.execute(
                select(UserProfile).where(UserProfile.user_id == user_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error loading profile for user {user_id}: {e}")
            raise DatabaseException(f"Failed to load profile for user {user_id}") from e

    async def update_profile(self, user_id: int, profile_data: UserProfileUpdate) -> UserProfile:
        """Apply the fields set on `profile_data` to the user's profile."""
        profile = await self.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundException(user_id)

        for field, value in profile_data.model_dump(exclude_unset=True).items():
            setattr(profile, field, value)

        try:
            await self.session.flush()
            await self.session.refresh(profile)
        except SQLAlchemyError as e:
            logger.error(f"Error updating profile for user {user_id}: {e}")
            raise DatabaseException(f"Failed to update profile for user {user_id}") from e

        log_database_operation("update", "user_profiles", record_id=profile.id, user_id=user_id)
        return profile

    async def set_profile_document(self, user_id: int, field: str, url: str) -> UserProfile:
        """Store the URL of an uploaded document on the profile."""
        return await self.update_profile(user_id, UserProfileUpdate(**{field: url}))

    async def get_profile_status(self, user_id: int) -> dict:
        """Report whether the profile has the parts employers look for."""
        profile = await self.get_profile(user_id)
        if profile is None:
            return {"complete": False, "has_resume": False, "has_bio": False}

        has_resume = bool(profile.resume_url)
        has_bio = bool(profile.bio)
        return {
            "complete": has_resume and has_bio,
            "has_resume": has_resume,
            "has_bio": has_bio,
        }

    async def can_seek_jobs(self, user_id: int) -> bool:
        """A user can apply for jobs once they have a profile."""
        return await self.get_profile(user_id) is not None

    # Saved jobs

    async def count_saved_jobs(self, user_id: int) -> int:
        result = await self.session.execute(
            select(func.count(SavedJob.id)).where(SavedJob.user_id == user_id)
        )
        return result.scalar() or 0

    async def _find_saved_job(self, user_id: int, job_id: int) -> Optional[SavedJob]:
        result = await self.session.execute(
            select(SavedJob).where(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        )
        return result.scalar_one_or_none()

    async def save_job_for_user(self, user_id: int, job_id: int) -> SavedJob:
        """
        Save a job for a user, capped at `saved_jobs_limit` saved jobs.

        Runs in the session's transaction. The user row is locked first so
        concurrent saves for the same user cannot both pass the count check.
        Re-saving a job that is already saved refreshes its timestamp.

        Raises:
            UserNotFoundException: If the user does not exist or is not active
            SavedJobsLimitExceededException: If the cap is reached
            JobNotFoundException: If the job does not exist
        """
        try:
            locked = await self.session.execute(
                select(User.id)
                .where(User.id == user_id, User.status == "active")
                .with_for_update()
            )
            if locked.scalar_one_or_none() is None:
                raise UserNotFoundException(user_id)

            existing = await self._find_saved_job(user_id, job_id)
            if existing is not None:
                existing.saved_at = datetime.now(timezone.utc)
                await self.session.flush()
                return existing

            saved_total = await self.count_saved_jobs(user_id)
            if saved_total >= self.saved_jobs_limit:
                logger.info(
                    "Saved jobs limit reached",
                    user_id=user_id,
                    job_id=job_id,
                    limit=self.saved_jobs_limit,
                )
                raise SavedJobsLimitExceededException(self.saved_jobs_limit)

            job_exists = await self.session.execute(select(Job.id).where(Job.id == job_id))
            if job_exists.scalar_one_or_none() is None:
                raise JobNotFoundException(job_id)

            saved_job = SavedJob(user_id=user_id, job_id=job_id)
            self.session.add(saved_job)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error saving job {job_id} for user {user_id}: {e}")
            raise DatabaseException("Failed to save job") from e

        log_database_operation("create", "saved_jobs", record_id=saved_job.id, user_id=user_id)
        return saved_job

    async def get_saved_jobs_for_user(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[SavedJobItem], PaginationMeta]:
        """Return one page of the user's saved jobs, newest first."""
        offset = max(0, (page - 1) * limit)
        try:
            query = (
                select(SavedJob)
                .options(selectinload(SavedJob.job))
                .where(SavedJob.user_id == user_id)
                .order_by(SavedJob.saved_at.desc(), SavedJob.id.desc())
                .offset(offset)
                .limit(limit)
            )
            result = await self.session.execute(query)
            saved_jobs = result.scalars().all()
            total = await self.count_saved_jobs(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error listing saved jobs for user {user_id}: {e}")
            raise DatabaseException("Failed to retrieve saved jobs") from e

        items = [self._to_saved_job_item(saved_job) for saved_job in saved_jobs]
        return items, build_pagination_meta(total=total, page=page, limit=limit)

    @staticmethod
    def _to_saved_job_item(saved_job: SavedJob) -> SavedJobItem:
        job = saved_job.job
        summary = SavedJobSummary(
            id=job.id,
            title=job.title,
            city=job.city,
            state=job.state,
            country=job.country,
            job_type=job.job_type,
            is_remote=job.is_remote,
            is_active=job.is_active,
            application_deadline=job.application_deadline,
            employer=SavedJobEmployer(name=job.employer_name, logo_url=job.employer_logo_url),
        )
        return SavedJobItem(
            id=saved_job.id,
            saved_at=saved_job.saved_at,
            job=summary,
            is_closed=job.is_closed,
            is_expired=not job.is_active,
        )

    async def is_job_saved_by_user(self, user_id: int, job_id: int) -> bool:
        try:
            return await self._find_saved_job(user_id, job_id) is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking saved job {job_id} for user {user_id}: {e}")
            raise DatabaseException("Failed to check saved job") from e

    async def unsave_job_for_user(self, user_id: int, job_id: int) -> None:
        """
        Remove a saved job.

        Raises:
            JobNotFoundException: If the job is not in the user's saved jobs
        """
        try:
            result = await self.session.execute(
                delete(SavedJob).where(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
            )
        except SQLAlchemyError as e:
            logger.error(f"Error unsaving job {job_id} for user {user_id}: {e}")
            raise DatabaseException("Failed to unsave job") from e

        if result.rowcount == 0:
            raise JobNotFoundException(job_id)

        log_database_operation("delete", "saved_jobs", user_id=user_id, job_id=job_id)
