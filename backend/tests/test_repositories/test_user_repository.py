"""
Tests for UserRepository: profiles and the saved-jobs cap.
"""

from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from sqlalchemy import func, select

from jobboard.core.exceptions import (
    EmailAlreadyRegisteredException,
    JobNotFoundException,
    ProfileNotFoundException,
    SavedJobsLimitExceededException,
    UserNotFoundException,
)
from jobboard.models.job import Job
from jobboard.models.user import SavedJob
from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.user import UserProfileUpdate


async def _add_jobs(session, count: int, **overrides) -> List[Job]:
    jobs = [Job(title=f"Job {index}", employer_name="Acme", **overrides) for index in range(count)]
    session.add_all(jobs)
    await session.flush()
    return jobs


async def _saved_count(session, user_id: int) -> int:
    result = await session.execute(
        select(func.count(SavedJob.id)).where(SavedJob.user_id == user_id)
    )
    return result.scalar()


@pytest.mark.database
class TestSavedJobsLimit:
    """Test the 50 saved jobs cap."""

    async def test_save_increments_count_by_one(self, db_session, test_user):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 3)
        await repo.save_job_for_user(test_user.id, jobs[0].id)
        await repo.save_job_for_user(test_user.id, jobs[1].id)

        before = await _saved_count(db_session, test_user.id)
        await repo.save_job_for_user(test_user.id, jobs[2].id)

        assert await _saved_count(db_session, test_user.id) == before + 1

    async def test_limit_reached_at_fifty(self, db_session, test_user):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 51)
        for job in jobs[:50]:
            await repo.save_job_for_user(test_user.id, job.id)
        assert await _saved_count(db_session, test_user.id) == 50

        with pytest.raises(SavedJobsLimitExceededException) as exc_info:
            await repo.save_job_for_user(test_user.id, jobs[50].id)

        assert exc_info.value.user_message == "Saved jobs limit reached. You can save up to 50 jobs."
        assert exc_info.value.http_status == 400
        assert await _saved_count(db_session, test_user.id) == 50
        assert not await repo.is_job_saved_by_user(test_user.id, jobs[50].id)

    async def test_resaving_at_limit_is_allowed(self, db_session, test_user):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 50)
        for job in jobs:
            await repo.save_job_for_user(test_user.id, job.id)

        saved = await repo.save_job_for_user(test_user.id, jobs[0].id)

        assert saved.job_id == jobs[0].id
        assert await _saved_count(db_session, test_user.id) == 50

    async def test_custom_limit(self, db_session, test_user):
        repo = UserRepository(db_session, saved_jobs_limit=2)
        jobs = await _add_jobs(db_session, 3)
        await repo.save_job_for_user(test_user.id, jobs[0].id)
        await repo.save_job_for_user(test_user.id, jobs[1].id)

        with pytest.raises(SavedJobsLimitExceededException) as exc_info:
            await repo.save_job_for_user(test_user.id, jobs[2].id)

        assert exc_info.value.details == {"limit": 2}

    async def test_zero_limit_blocks_every_save(self, db_session, test_user):
        repo = UserRepository(db_session, saved_jobs_limit=0)
        jobs = await _add_jobs(db_session, 1)

        with pytest.raises(SavedJobsLimitExceededException) as exc_info:
            await repo.save_job_for_user(test_user.id, jobs[0].id)

        assert exc_info.value.details == {"limit": 0}
        assert await _saved_count(db_session, test_user.id) == 0

    async def test_unknown_job(self, db_session, test_user):
        repo = UserRepository(db_session)

        with pytest.raises(JobNotFoundException):
            await repo.save_job_for_user(test_user.id, 9999)

    async def test_unknown_user(self, db_session):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 1)

        with pytest.raises(UserNotFoundException):
            await repo.save_job_for_user(9999, jobs[0].id)

    @pytest.mark.parametrize("status", ["deactivated", "deleted"])
    async def test_inactive_user(self, db_session, user_factory, status):
        user = await user_factory(status=status)
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 1)

        with pytest.raises(UserNotFoundException):
            await repo.save_job_for_user(user.id, jobs[0].id)

        assert await _saved_count(db_session, user.id) == 0


@pytest.mark.database
class TestSavedJobsQueries:

    async def test_duplicate_save_refreshes_saved_at(self, db_session, test_user):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 1)
        first = await repo.save_job_for_user(test_user.id, jobs[0].id)
        first.saved_at = datetime(2020, 1, 1, tzinfo=timezone.utc)
        await db_session.flush()

        again = await repo.save_job_for_user(test_user.id, jobs[0].id)

        assert again.id == first.id
        assert again.saved_at.year > 2020
        assert await _saved_count(db_session, test_user.id) == 1

    async def test_list_newest_first_with_total(self, db_session, test_user):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 12)
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for index, job in enumerate(jobs):
            saved = await repo.save_job_for_user(test_user.id, job.id)
            saved.saved_at = base + timedelta(minutes=index)
        await db_session.flush()

        items, pagination = await repo.get_saved_jobs_for_user(test_user.id, page=1, limit=5)

        assert [item.job.id for item in items] == [job.id for job in reversed(jobs)][:5]
        assert pagination.total == 12
        assert pagination.total_pages == 3
        assert pagination.has_next is True

        items, pagination = await repo.get_saved_jobs_for_user(test_user.id, page=3, limit=5)
        assert len(items) == 2
        assert pagination.has_next is False
        assert pagination.previous_page == 2

    async def test_list_flags_closed_and_expired_jobs(self, db_session, test_user):
        repo = UserRepository(db_session)
        closed = Job(
            title="Closed",
            employer_name="Acme",
            application_deadline=datetime.now(timezone.utc) - timedelta(days=1),
        )
        expired = Job(title="Expired", employer_name="Acme", is_active=False)
        open_job = Job(
            title="Open",
            employer_name="Acme",
            application_deadline=datetime.now(timezone.utc) + timedelta(days=7),
        )
        db_session.add_all([closed, expired, open_job])
        await db_session.flush()
        for job in (closed, expired, open_job):
            await repo.save_job_for_user(test_user.id, job.id)

        items, _ = await repo.get_saved_jobs_for_user(test_user.id)
        by_title = {item.job.title: item for item in items}

        assert by_title["Closed"].is_closed is True
        assert by_title["Closed"].is_expired is False
        assert by_title["Expired"].is_expired is True
        assert by_title["Open"].is_closed is False
        assert by_title["Open"].job.employer.name == "Acme"

    async def test_unsave(self, db_session, test_user):
        repo = UserRepository(db_session)
        jobs = await _add_jobs(db_session, 1)
        await repo.save_job_for_user(test_user.id, jobs[0].id)

        await repo.unsave_job_for_user(test_user.id, jobs[0].id)

        assert await repo.is_job_saved_by_user(test_user.id, jobs[0].id) is False

    async def test_unsave_job_that_is_not_saved(self, db_session, test_user):
        repo = UserRepository(db_session)

        with pytest.raises(JobNotFoundException):
            await repo.unsave_job_for_user(test_user.id, 12345)


@pytest.mark.database
class TestUserProfiles:

    async def test_create_user_creates_empty_profile(self, db_session):
        repo = UserRepository(db_session)

        user = await repo.create_user(
            email="new@example.com",
            full_name="New User",
            password_hash="hash",
            role="employer",
        )

        assert user.profile is not None
        assert user.profile.bio is None
        assert user.role == "employer"
        assert await repo.can_seek_jobs(user.id) is True

    async def test_find_by_email_is_case_insensitive(self, db_session, test_user):
        repo = UserRepository(db_session)

        found = await repo.find_by_email("JANE@example.com")

        assert found is not None
        assert found.id == test_user.id

    async def test_create_user_with_taken_email(self, db_session, test_user):
        repo = UserRepository(db_session)

        with pytest.raises(EmailAlreadyRegisteredException) as exc_info:
            await repo.create_user(
                email="jane@example.com",
                full_name="Someone Else",
                password_hash="hash",
            )

        assert exc_info.value.http_status == 409

    async def test_find_by_email_and_deleted_accounts(self, db_session, user_factory):
        user = await user_factory(email="gone@example.com", status="deleted")
        repo = UserRepository(db_session)

        assert await repo.find_by_email("gone@example.com") is None
        found = await repo.find_by_email("gone@example.com", include_deleted=True)
        assert found is not None
        assert found.id == user.id

    async def test_is_active_user(self, db_session, test_user, user_factory):
        deactivated = await user_factory(status="deactivated")
        repo = UserRepository(db_session)

        assert await repo.is_active_user(test_user.id) is True
        assert await repo.is_active_user(deactivated.id) is False
        assert await repo.is_active_user(9999) is False

    async def test_update_profile_only_touches_given_fields(self, db_session, test_user):
        repo = UserRepository(db_session)
        await repo.update_profile(test_user.id, UserProfileUpdate(bio="Hello"))

        profile = await repo.update_profile(test_user.id, UserProfileUpdate(is_open_to_work=True))

        assert profile.bio == "Hello"
        assert profile.is_open_to_work is True

    async def test_update_missing_profile(self, db_session):
        repo = UserRepository(db_session)

        with pytest.raises(ProfileNotFoundException):
            await repo.update_profile(9999, UserProfileUpdate(bio="Hello"))

    async def test_profile_status(self, db_session, test_user):
        repo = UserRepository(db_session)
        assert await repo.get_profile_status(test_user.id) == {
            "complete": False,
            "has_resume": False,
            "has_bio": False,
        }

        await repo.update_profile(
            test_user.id,
            UserProfileUpdate(bio="Hello", resume_url="https://files.example.com/cv.pdf"),
        )

        status = await repo.get_profile_status(test_user.id)
        assert status["complete"] is True

    async def test_profile_status_without_profile(self, db_session):
        repo = UserRepository(db_session)

        assert (await repo.get_profile_status(9999))["complete"] is False
        assert await repo.can_seek_jobs(9999) is False
