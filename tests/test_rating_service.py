import asyncio

import pytest

from scorecard.shared.core.exceptions import (
    AlreadyRatedError,
    ContentNotFoundError,
    InvalidCategoryError,
    InvalidScoreError,
    NotYetRatedError,
)
from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.repositories.rating_repository import RatingRepository
from scorecard.shared.services.rating_service import RatingService


class FixedContentDirectory:
    def __init__(self, *content_ids):
        self.content_ids = set(content_ids)

    async def exists(self, content_id):
        return content_id in self.content_ids


async def _stored(sessions, user_id, content_id):
    async with sessions() as session:
        record = await RatingService(session).get_rating(user_id, content_id)
        return None if record is None else dict(record.ratings)


def test_submit_then_get_round_trip(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                result = await RatingService(session).submit_rating("u-1", "c-1", "clarity", 64)
            return result, await _stored(sessions, "u-1", "c-1")

    result, stored = asyncio.run(_run())
    assert result.category is RatingCategory.CLARITY
    assert (result.user_id, result.content_id, result.score) == ("u-1", "c-1", 64)
    assert stored == {"clarity": 64}


def test_second_submit_conflicts_and_leaves_state(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                await RatingService(session).submit_rating("u-1", "c-1", "clarity", 10)
            async with sessions() as session:
                with pytest.raises(AlreadyRatedError) as excinfo:
                    await RatingService(session).submit_rating("u-1", "c-1", "clarity", 99)
            return excinfo.value, await _stored(sessions, "u-1", "c-1")

    error, stored = asyncio.run(_run())
    assert error.score == 10
    assert stored == {"clarity": 10}


def test_submit_other_category_extends_record(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 10)
                await service.submit_rating("u-1", "c-1", "difficulty", 90)
            return await _stored(sessions, "u-1", "c-1")

    assert asyncio.run(_run()) == {"clarity": 10, "difficulty": 90}


def test_update_then_read(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 50)
                result = await service.update_rating("u-1", "c-1", "clarity", 80)
            return result, await _stored(sessions, "u-1", "c-1")

    result, stored = asyncio.run(_run())
    assert result.score == 80
    assert stored == {"clarity": 80}


def test_update_without_rating_is_rejected(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                with pytest.raises(NotYetRatedError):
                    await service.update_rating("u-1", "c-1", "clarity", 80)
                await service.submit_rating("u-1", "c-1", "difficulty", 5)
                with pytest.raises(NotYetRatedError):
                    await service.update_rating("u-1", "c-1", "clarity", 80)

    asyncio.run(_run())


def test_remove_then_update_is_rejected(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 50)
                removed = await service.remove_rating("u-1", "c-1", "clarity")
                with pytest.raises(NotYetRatedError):
                    await service.update_rating("u-1", "c-1", "clarity", 10)
            return removed, await _stored(sessions, "u-1", "c-1")

    removed, stored = asyncio.run(_run())
    assert removed.score == 50
    # Last category removed: the record is gone
    assert stored is None


def test_remove_allows_resubmission(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 50)
                await service.submit_rating("u-1", "c-1", "usefulness", 70)
                await service.remove_rating("u-1", "c-1", "clarity")
                await service.submit_rating("u-1", "c-1", "clarity", 20)
            return await _stored(sessions, "u-1", "c-1")

    assert asyncio.run(_run()) == {"usefulness": 70, "clarity": 20}


def test_remove_unrated_category_is_rejected(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                with pytest.raises(NotYetRatedError):
                    await RatingService(session).remove_rating("u-1", "c-1", "clarity")

    asyncio.run(_run())


def test_remove_for_unknown_content_is_not_found(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session, content_directory=FixedContentDirectory("c-1"))
                await service.submit_rating("u-1", "c-1", "clarity", 50)
                with pytest.raises(ContentNotFoundError):
                    await service.remove_rating("u-1", "c-404", "clarity")
                await service.remove_rating("u-1", "c-1", "clarity")

    asyncio.run(_run())


def test_checks_run_in_order_before_any_write(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 50)
                # Category is checked before score, score before stored state
                with pytest.raises(InvalidCategoryError):
                    await service.submit_rating("u-1", "c-1", "beauty", 500)
                with pytest.raises(InvalidScoreError):
                    await service.submit_rating("u-1", "c-1", "clarity", 500)
                with pytest.raises(InvalidScoreError):
                    await service.update_rating("u-1", "c-1", "clarity", None)
                with pytest.raises(InvalidCategoryError):
                    await service.remove_rating("u-1", "c-1", None)
            return await _stored(sessions, "u-1", "c-1")

    assert asyncio.run(_run()) == {"clarity": 50}


def test_concurrent_submissions_yield_one_success(database):
    attempts = 8

    async def _submit(sessions, score):
        async with sessions() as session:
            return await RatingService(session).submit_rating("u-1", "c-1", "clarity", score)

    async def _run():
        async with database() as sessions:
            outcomes = await asyncio.gather(
                *(_submit(sessions, score) for score in range(attempts)),
                return_exceptions=True,
            )
            return outcomes, await _stored(sessions, "u-1", "c-1")

    outcomes, stored = asyncio.run(_run())

    successes = [o for o in outcomes if not isinstance(o, Exception)]
    conflicts = [o for o in outcomes if isinstance(o, AlreadyRatedError)]
    assert len(successes) == 1
    assert len(conflicts) == attempts - 1
    assert stored == {"clarity": successes[0].score}
    assert {c.score for c in conflicts} == {successes[0].score}


def test_mutations_are_independent_per_user_and_content(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 10)
                await service.submit_rating("u-2", "c-1", "clarity", 20)
                await service.submit_rating("u-1", "c-2", "clarity", 30)
                await service.update_rating("u-1", "c-1", "clarity", 11)
                await service.remove_rating("u-1", "c-1", "clarity")
            return (
                await _stored(sessions, "u-2", "c-1"),
                await _stored(sessions, "u-1", "c-2"),
            )

    other_user, other_content = asyncio.run(_run())
    assert other_user == {"clarity": 20}
    assert other_content == {"clarity": 30}


def test_get_user_rating_requires_any_rating(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                with pytest.raises(NotYetRatedError):
                    await service.get_user_rating("u-1", "c-1")
                await service.submit_rating("u-1", "c-1", "engagement", 33)
                record = await service.get_user_rating("u-1", "c-1")
                return record.ratings

    assert asyncio.run(_run()) == {"engagement": 33}


def test_summarize_content_aggregates_across_users(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 40)
                await service.submit_rating("u-2", "c-1", "clarity", 90)
                await service.submit_rating("u-3", "c-1", "clarity", 65)
                await service.submit_rating("u-2", "c-1", "difficulty", 10)
                await service.submit_rating("u-1", "c-2", "usefulness", 100)
                return await service.summarize_content("c-1")

    summary = asyncio.run(_run())

    assert summary.content_id == "c-1"
    assert summary.raters == 3
    by_category = {item.category: item for item in summary.categories}
    assert [item.category for item in summary.categories] == RatingCategory.all()

    clarity = by_category[RatingCategory.CLARITY]
    assert (clarity.count, clarity.average, clarity.minimum, clarity.maximum) == (3, 65.0, 40, 90)

    difficulty = by_category[RatingCategory.DIFFICULTY]
    assert (difficulty.count, difficulty.average) == (1, 10.0)

    usefulness = by_category[RatingCategory.USEFULNESS]
    assert usefulness.count == 0
    assert usefulness.average is None
    assert usefulness.minimum is None


def test_summarize_unrated_content(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                return await RatingService(session).summarize_content("c-empty")

    summary = asyncio.run(_run())
    assert summary.raters == 0
    assert all(item.count == 0 for item in summary.categories)


def test_list_user_ratings(database):
    async def _run():
        async with database() as sessions:
            async with sessions() as session:
                service = RatingService(session)
                await service.submit_rating("u-1", "c-1", "clarity", 1)
                await service.submit_rating("u-1", "c-2", "clarity", 2)
                await service.submit_rating("u-2", "c-3", "clarity", 3)
                records = await service.list_user_ratings("u-1")
                return [(r.content_id, r.ratings) for r in records]

    assert asyncio.run(_run()) == [("c-1", {"clarity": 1}), ("c-2", {"clarity": 2})]


def test_concurrent_categories_from_separate_workers_are_all_kept(database, new_redis_adapter):
    async def _submit(sessions, category, score):
        async with sessions() as session:
            # Each call gets its own Redis client, as a separate process would
            repo = RatingRepository(session, redis=new_redis_adapter())
            return await RatingService(session, repo=repo).submit_rating(
                "u-1", "c-1", category, score
            )

    async def _run():
        async with database() as sessions:
            await _submit(sessions, "clarity", 10)
            outcomes = await asyncio.gather(
                _submit(sessions, "difficulty", 20),
                _submit(sessions, "usefulness", 30),
                _submit(sessions, "engagement", 40),
                return_exceptions=True,
            )
            return outcomes, await _stored(sessions, "u-1", "c-1")

    outcomes, stored = asyncio.run(_run())

    assert not [o for o in outcomes if isinstance(o, Exception)]
    assert stored == {"clarity": 10, "difficulty": 20, "usefulness": 30, "engagement": 40}


def test_concurrent_submissions_from_separate_workers_yield_one_success(
    database, new_redis_adapter
):
    async def _submit(sessions, score):
        async with sessions() as session:
            repo = RatingRepository(session, redis=new_redis_adapter())
            return await RatingService(session, repo=repo).submit_rating(
                "u-1", "c-1", "clarity", score
            )

    async def _run():
        async with database() as sessions:
            return await asyncio.gather(
                *(_submit(sessions, score) for score in (1, 2, 3, 4)),
                return_exceptions=True,
            )

    outcomes = asyncio.run(_run())

    assert len([o for o in outcomes if not isinstance(o, Exception)]) == 1
    assert len([o for o in outcomes if isinstance(o, AlreadyRatedError)]) == 3
