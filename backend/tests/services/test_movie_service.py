"""MovieService — domain/entity conversion around the repository."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from blackslope.models.movie import Movie
from blackslope.services.domain import MovieDomainModel
from blackslope.services.movie_service import MovieService


@pytest.fixture
def repository():
    return AsyncMock()


@pytest.fixture
def service(repository):
    return MovieService(repository)


async def test_get_all_movies_maps_entities(service, repository):
    repository.get_all.return_value = [
        Movie(id=1, title="Alien", description="Space"),
        Movie(id=2, title="Heat", description="Cops"),
    ]

    movies = await service.get_all_movies()

    assert movies == [
        MovieDomainModel(id=1, title="Alien", description="Space"),
        MovieDomainModel(id=2, title="Heat", description="Cops"),
    ]


async def test_get_movie_missing_returns_none(service, repository):
    repository.get_single.return_value = None

    assert await service.get_movie(5) is None
    repository.get_single.assert_awaited_once_with(5)


async def test_create_movie_passes_entity_without_id(service, repository):
    release = datetime(2001, 1, 1, tzinfo=timezone.utc)
    repository.create.side_effect = lambda entity: Movie(
        id=10, title=entity.title, description=entity.description, release_date=entity.release_date
    )

    created = await service.create_movie(MovieDomainModel(title="Amelie", description="Paris", release_date=release))

    sent = repository.create.await_args.args[0]
    assert sent.id is None
    assert created == MovieDomainModel(id=10, title="Amelie", description="Paris", release_date=release)


async def test_update_movie_missing_returns_none(service, repository):
    repository.update.return_value = None

    assert await service.update_movie(MovieDomainModel(id=9, title="x", description="y")) is None


async def test_delete_movie_returns_repository_result(service, repository):
    repository.delete.return_value = 4

    assert await service.delete_movie(4) == 4


async def test_check_if_movie_exists_delegates(service, repository):
    repository.movie_exists.return_value = True

    assert await service.check_if_movie_exists("Alien", None) is True
    repository.movie_exists.assert_awaited_once_with("Alien", None)
