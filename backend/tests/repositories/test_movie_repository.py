"""MovieRepository — persistence against an in-memory SQLite database."""

from datetime import datetime, timezone

from blackslope.models.movie import Movie
from blackslope.repositories.movie_repository import MovieRepository


async def test_get_all_is_ordered_by_id(test_db, seeded_movies):
    movies = await MovieRepository(test_db).get_all()

    assert [m.id for m in movies] == sorted(m.id for m in seeded_movies)


async def test_get_single_unknown_returns_none(test_db, seeded_movies):
    assert await MovieRepository(test_db).get_single(999) is None


async def test_create_assigns_id(test_db):
    created = await MovieRepository(test_db).create(Movie(title="Jaws", description="Shark"))

    assert created.id is not None
    assert await MovieRepository(test_db).count() == 1


async def test_update_replaces_fields(test_db, seeded_movies):
    target = seeded_movies[0]
    repo = MovieRepository(test_db)

    updated = await repo.update(Movie(id=target.id, title="Renamed", description="New", release_date=None))

    assert updated.title == "Renamed"
    assert updated.release_date is None


async def test_update_unknown_returns_none(test_db):
    assert await MovieRepository(test_db).update(Movie(id=42, title="x", description="y")) is None


async def test_delete_returns_deleted_id(test_db, seeded_movies):
    repo = MovieRepository(test_db)
    target_id = seeded_movies[1].id

    assert await repo.delete(target_id) == target_id
    assert await repo.delete(target_id) is None
    assert await repo.count() == 2


async def test_movie_exists_is_case_insensitive_on_title(test_db, seeded_movies):
    repo = MovieRepository(test_db)

    assert await repo.movie_exists("INCEPTION", datetime(2010, 7, 16, tzinfo=timezone.utc))
    assert not await repo.movie_exists("Inception", datetime(2011, 1, 1, tzinfo=timezone.utc))


async def test_movie_exists_matches_null_release_date(test_db, seeded_movies):
    repo = MovieRepository(test_db)

    assert await repo.movie_exists("heat", None)
    assert not await repo.movie_exists("Inception", None)
