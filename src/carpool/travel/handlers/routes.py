from aws_lambda_powertools.event_handler.api_gateway import Router

from carpool.api.dependencies import (
    container,
    current_user,
    pagination,
    parse_body,
    parse_query,
)
from carpool.shared.domain import Paginated
from carpool.shared.domain.result import map_ok
from carpool.shared.utils import result_response
from carpool.travel.applications import CreateTravelInput
from carpool.travel.domain.entity import TravelFilters
from carpool.travel.handlers.request_models import (
    CreateCityRequest,
    CreateTravelRequest,
    SearchTravelsQuery,
)
from carpool.travel.handlers.response_models import TravelData

travel_router = Router()
city_router = Router()


def _to_page(page: Paginated) -> Paginated[TravelData]:
    return Paginated[TravelData](
        data=[TravelData.from_entity(t) for t in page.data], meta=page.meta
    )


# ---------- travels ----------
@travel_router.get("/")
def list_travels():
    result = container().list_travels.execute(pagination(travel_router.current_event))
    return result_response(map_ok(result, _to_page))


@travel_router.post("/")
def create_travel():
    claims = current_user(travel_router.current_event)
    body = parse_body(travel_router.current_event, CreateTravelRequest)
    result = container().create_travel.execute(
        CreateTravelInput(
            user_id=claims.user_id,
            date=body.date,
            kms=body.kms,
            seats=body.seats,
            car_id=body.car_id,
            departure_city=body.departure_city,
            arrival_city=body.arrival_city,
        )
    )
    return result_response(map_ok(result, TravelData.from_entity), status_code=201)


@travel_router.get("/search")
def search_travels():
    query = parse_query(travel_router.current_event, SearchTravelsQuery)
    result = container().find_travels.execute(
        TravelFilters(
            departure_city=query.departure_city,
            arrival_city=query.arrival_city,
            date=query.date,
        )
    )
    return result_response(
        map_ok(result, lambda travels: [TravelData.from_entity(t) for t in travels])
    )


@travel_router.get("/<id>")
def get_travel(id: str):
    result = container().get_travel.execute(id)
    return result_response(map_ok(result, TravelData.from_entity))


@travel_router.delete("/<id>")
def delete_travel(id: str):
    claims = current_user(travel_router.current_event)
    return result_response(container().delete_travel.execute(id, claims.user_id))


@travel_router.get("/<id>/passengers")
def list_passengers(id: str):
    current_user(travel_router.current_event)
    result = container().list_trip_passengers.execute(
        id, pagination(travel_router.current_event)
    )
    return result_response(result)


# ---------- cities ----------
@city_router.get("/")
def list_cities():
    return result_response(
        container().list_cities.execute(pagination(city_router.current_event))
    )


@city_router.post("/")
def create_city():
    current_user(city_router.current_event)
    body = parse_body(city_router.current_event, CreateCityRequest)
    return result_response(
        container().create_city.execute(body.name, body.zipcode), status_code=201
    )


@city_router.delete("/<id>")
def delete_city(id: str):
    current_user(city_router.current_event)
    return result_response(container().delete_city.execute(id))
