"""
Faithtrack Backend: Prayer Wall Service Unit Tests
====================================================

What we test:
    ✅ The wall is public and capped at the 50 newest posts
    ✅ Posting requires a caller and starts at prayer_count 0
    ✅ Any signed-in caller may pray, repeatedly
    ✅ The increment is applied against the stored value, not a stale read
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import text

from faithtrack.exceptions import NotFoundError, UnauthenticatedError
from faithtrack.models.prayer_wall import PrayerWallPost
from faithtrack.schemas.prayer_wall import PrayerWallCreate
from faithtrack.services.prayer_wall_service import WALL_LIMIT, PrayerWallService


class TestListPosts:

    def setup_method(self):
        self.service = PrayerWallService()

    @pytest.mark.asyncio
    async def test_shows_newest_fifty_from_all_users(self, db_session):
        base = datetime(2024, 5, 1, tzinfo=timezone.utc)
        for i in range(WALL_LIMIT + 5):
            db_session.add(
                PrayerWallPost(
                    user_id=f"user-{i % 3}",
                    intention=f"Intention {i}",
                    created_at=base + timedelta(minutes=i),
                )
            )
        await db_session.flush()

        posts = await self.service.list_posts(db_session)

        assert len(posts) == WALL_LIMIT
        assert posts[0].intention == f"Intention {WALL_LIMIT + 4}"
        assert posts[-1].intention == "Intention 5"
        assert {p.user_id for p in posts} == {"user-0", "user-1", "user-2"}

    @pytest.mark.asyncio
    async def test_empty_wall(self, db_session):
        assert await self.service.list_posts(db_session) == []


class TestCreatePost:

    def setup_method(self):
        self.service = PrayerWallService()

    @pytest.mark.asyncio
    async def test_new_post_has_no_prayers(self, db_session):
        post_id = await self.service.create_post(
            db_session,
            "user-1",
            PrayerWallCreate(intention="Peace for my city", user_name="Sam"),
        )

        [post] = await self.service.list_posts(db_session)
        assert post.id == post_id
        assert post.prayer_count == 0
        assert post.user_name == "Sam"
        assert post.user_id == "user-1"

    @pytest.mark.asyncio
    async def test_display_name_is_optional(self, db_session):
        await self.service.create_post(db_session, "user-1", PrayerWallCreate(intention="Rain"))
        [post] = await self.service.list_posts(db_session)
        assert post.user_name is None

    @pytest.mark.asyncio
    async def test_requires_caller(self, db_session):
        with pytest.raises(UnauthenticatedError):
            await self.service.create_post(db_session, None, PrayerWallCreate(intention="Rain"))


class TestIncrementPrayer:

    def setup_method(self):
        self.service = PrayerWallService()

    @pytest.mark.asyncio
    async def test_any_user_can_pray_repeatedly(self, db_session):
        post_id = await self.service.create_post(
            db_session, "user-1", PrayerWallCreate(intention="Job interview")
        )

        await self.service.increment_prayer(db_session, "user-2", post_id)
        await self.service.increment_prayer(db_session, "user-2", post_id)
        updated = await self.service.increment_prayer(db_session, "user-1", post_id)

        assert updated.prayer_count == 3

    @pytest.mark.asyncio
    async def test_increment_applies_to_current_stored_value(self, db_session):
        post_id = await self.service.create_post(
            db_session, "user-1", PrayerWallCreate(intention="Safe travels")
        )
        # Another writer bumps the row behind this session's back
        await db_session.execute(
            text("UPDATE prayer_wall_posts SET prayer_count = 5"),
        )

        updated = await self.service.increment_prayer(db_session, "user-2", post_id)

        assert updated.prayer_count == 6

    @pytest.mark.asyncio
    async def test_missing_post(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.increment_prayer(db_session, "user-1", uuid.uuid4())

    @pytest.mark.asyncio
    async def test_requires_caller(self, db_session):
        post_id = await self.service.create_post(
            db_session, "user-1", PrayerWallCreate(intention="Healing")
        )
        with pytest.raises(UnauthenticatedError):
            await self.service.increment_prayer(db_session, None, post_id)

        [post] = await self.service.list_posts(db_session)
        assert post.prayer_count == 0
