"""Movie mappers — view model <-> domain <-> entity."""

from datetime import datetime, timezone

from blackslope.mappers.movies import (
    create_request_to_domain,
    domain_to_entity,
    domain_to_response,
    entity_to_domain,
    update_request_to_domain,
)
from blackslope.schemas.movies import CreateMovieViewModel, UpdateMovieViewModel
from blackslope.services.domain import MovieDomainModel

RELEASE = datetime(1999, 3, 31, tzinfo=timezone.utc)


def test_create_request_has_no_id():
    domain = create_request_to_domain(CreateMovieViewModel(title="Matrix", description="Red pill", releaseDate=RELEASE))

    assert domain == MovieDomainModel(title="Matrix", description="Red pill", release_date=RELEASE)


def test_update_request_takes_route_id():
    view_model = UpdateMovieViewModel(title="Matrix", description="Blue pill")

    assert update_request_to_domain(7, view_model).id == 7


def test_entity_round_trip_keeps_id():
    domain = MovieDomainModel(id=3, title="Matrix", description="Red pill", release_date=RELEASE)

    assert entity_to_domain(domain_to_entity(domain)) == domain


def test_response_serializes_camel_case_and_omits_null():
    response = domain_to_response(MovieDomainModel(id=1, title="Heat", description="Cops"))

    assert response.model_dump(by_alias=True, exclude_none=True) == {"id": 1, "title": "Heat", "description": "Cops"}


def test_view_model_assumes_utc_for_naive_dates():
    view_model = CreateMovieViewModel(title="Heat", description="Cops", release_date=datetime(1995, 12, 15))

    assert view_model.release_date.tzinfo == timezone.utc
