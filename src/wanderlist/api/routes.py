"""REST API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from wanderlist.api.schemas import (
    CityRead,
    ErrorResponse,
    PersonCityRead,
    PersonDetail,
    PersonRead,
    PersonRequest,
    UpdatePersonCityRequest,
)
from wanderlist.catalog.store import get_city, list_cities
from wanderlist.config import settings
from wanderlist.database import EntityStore, get_store
from wanderlist.people.engine import (
    create_person,
    delete_person,
    get_person,
    list_persons,
    update_person,
)
from wanderlist.travel.manager import add_city, list_person_cities, mark_visited, remove_city
from wanderlist.travel.models import VISITED_CITY_MESSAGE, RemoveOutcome

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _not_found() -> Response:
    return Response(status_code=404)


def _cache_city_response(response: Response) -> None:
    response.headers["Cache-Control"] = f"public, max-age={settings.cities_cache_seconds}"


# --- Persons CRUD ---


@router.get("/persons", response_model=list[PersonRead])
def list_all_persons(
    store: EntityStore = Depends(get_store),
) -> list[PersonRead]:
    persons = list_persons(store)
    logger.info("Retrieved %d persons", len(persons))
    return [PersonRead.model_validate(p) for p in persons]


@router.get("/persons/{person_id}", response_model=PersonDetail)
def get_person_detail(
    person_id: int,
    store: EntityStore = Depends(get_store),
) -> PersonDetail | Response:
    person = get_person(store, person_id)
    if person is None:
        logger.warning("Person %s not found", person_id)
        return _not_found()
    detail = PersonDetail.model_validate(person)
    cities = list_person_cities(store, person_id) or []
    detail.cities = [PersonCityRead.model_validate(c) for c in cities]
    return detail


@router.post("/persons", status_code=201, response_model=PersonRead)
def create_new_person(
    body: PersonRequest,
    request: Request,
    response: Response,
    store: EntityStore = Depends(get_store),
) -> PersonRead:
    person = create_person(store, body.to_data())
    response.headers["Location"] = str(request.url_for("get_person_detail", person_id=person.id))
    logger.info("Created person %s %s (id=%s)", person.first_name, person.last_name, person.id)
    return PersonRead.model_validate(person)


@router.put("/persons/{person_id}", response_model=PersonRead)
def update_existing_person(
    person_id: int,
    body: PersonRequest,
    store: EntityStore = Depends(get_store),
) -> PersonRead | Response:
    person = update_person(store, person_id, body.to_data())
    if person is None:
        logger.warning("Person %s not found for update", person_id)
        return _not_found()
    logger.info("Updated person %s", person_id)
    return PersonRead.model_validate(person)


@router.delete("/persons/{person_id}", status_code=204)
def delete_existing_person(
    person_id: int,
    store: EntityStore = Depends(get_store),
) -> Response:
    if not delete_person(store, person_id):
        logger.warning("Person %s not found for deletion", person_id)
        return _not_found()
    logger.info("Deleted person %s", person_id)
    return Response(status_code=204)


# --- Cities on a person's list ---


@router.get("/persons/{person_id}/cities", response_model=list[PersonCityRead])
def get_person_cities(
    person_id: int,
    store: EntityStore = Depends(get_store),
) -> list[PersonCityRead] | Response:
    cities = list_person_cities(store, person_id)
    if cities is None:
        logger.warning("Person %s not found", person_id)
        return _not_found()
    logger.info("Retrieved %d cities for person %s", len(cities), person_id)
    return [PersonCityRead.model_validate(c) for c in cities]


@router.post("/persons/{person_id}/cities/{city_id}", response_model=PersonCityRead)
def add_city_to_person(
    person_id: int,
    city_id: int,
    store: EntityStore = Depends(get_store),
) -> PersonCityRead | Response:
    link = add_city(store, person_id, city_id)
    if link is None:
        logger.warning("Person %s or city %s not found", person_id, city_id)
        return _not_found()
    logger.info("City %s added to person %s", city_id, person_id)
    return PersonCityRead.model_validate(link)


@router.put("/persons/{person_id}/cities/{city_id}", response_model=PersonCityRead)
def update_person_city(
    person_id: int,
    city_id: int,
    body: UpdatePersonCityRequest,
    store: EntityStore = Depends(get_store),
) -> PersonCityRead | Response:
    link = mark_visited(store, person_id, city_id, body.is_visited, body.visited_date)
    if link is None:
        logger.warning("City %s is not on the list of person %s", city_id, person_id)
        return _not_found()
    logger.info("City %s for person %s visited=%s", city_id, person_id, link.is_visited)
    return PersonCityRead.model_validate(link)


@router.delete(
    "/persons/{person_id}/cities/{city_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}},
)
def remove_city_from_person(
    person_id: int,
    city_id: int,
    store: EntityStore = Depends(get_store),
) -> Response:
    outcome = remove_city(store, person_id, city_id)
    if outcome is RemoveOutcome.not_found:
        logger.warning("City %s is not on the list of person %s", city_id, person_id)
        return _not_found()
    if outcome is RemoveOutcome.visited:
        logger.warning("Cannot remove visited city %s from person %s", city_id, person_id)
        return JSONResponse(status_code=400, content={"error": VISITED_CITY_MESSAGE})
    logger.info("City %s removed from person %s", city_id, person_id)
    return Response(status_code=204)


# --- City catalog ---


@router.get("/cities", response_model=list[CityRead])
def list_all_cities(
    response: Response,
    store: EntityStore = Depends(get_store),
) -> list[CityRead]:
    _cache_city_response(response)
    return [CityRead.model_validate(c) for c in list_cities(store)]


@router.get("/cities/{city_id}", response_model=CityRead)
def city_detail(
    city_id: int,
    response: Response,
    store: EntityStore = Depends(get_store),
) -> CityRead | Response:
    city = get_city(store, city_id)
    if city is None:
        logger.warning("City %s not found", city_id)
        return _not_found()
    _cache_city_response(response)
    return CityRead.model_validate(city)
