from aws_lambda_powertools.event_handler.api_gateway import Router

from carpool.api.dependencies import container, current_user, pagination, parse_body
from carpool.shared.utils import result_response
from carpool.vehicle.applications import CreateCarInput, UpdateCarInput
from carpool.vehicle.domain.entity import UpdateColorData
from carpool.vehicle.handlers.request_models import (
    CreateBrandRequest,
    CreateCarRequest,
    CreateColorRequest,
    UpdateCarRequest,
    UpdateColorRequest,
)

car_router = Router()
brand_router = Router()
color_router = Router()


# ---------- cars ----------
@car_router.get("/")
def list_cars():
    return result_response(container().list_cars.execute(pagination(car_router.current_event)))


@car_router.post("/")
def create_car():
    current_user(car_router.current_event)
    body = parse_body(car_router.current_event, CreateCarRequest)
    result = container().create_car.execute(
        CreateCarInput(
            license_plate=body.license_plate,
            brand_id=body.brand_id,
            model_name=body.model,
            color_id=body.color_id,
        )
    )
    return result_response(result, status_code=201)


@car_router.patch("/<id>")
def update_car(id: str):
    current_user(car_router.current_event)
    body = parse_body(car_router.current_event, UpdateCarRequest)
    result = container().update_car.execute(
        id,
        UpdateCarInput(
            license_plate=body.license_plate,
            brand_id=body.brand_id,
            model_name=body.model,
            color_id=body.color_id,
        ),
    )
    return result_response(result)


@car_router.delete("/<id>")
def delete_car(id: str):
    current_user(car_router.current_event)
    return result_response(container().delete_car.execute(id))


# ---------- brands ----------
@brand_router.get("/")
def list_brands():
    return result_response(
        container().list_brands.execute(pagination(brand_router.current_event))
    )


@brand_router.post("/")
def create_brand():
    current_user(brand_router.current_event)
    body = parse_body(brand_router.current_event, CreateBrandRequest)
    return result_response(container().create_brand.execute(body.name), status_code=201)


@brand_router.delete("/<id>")
def delete_brand(id: str):
    current_user(brand_router.current_event)
    return result_response(container().delete_brand.execute(id))


# ---------- colors ----------
@color_router.get("/")
def list_colors():
    return result_response(
        container().list_colors.execute(pagination(color_router.current_event))
    )


@color_router.post("/")
def create_color():
    current_user(color_router.current_event)
    body = parse_body(color_router.current_event, CreateColorRequest)
    return result_response(
        container().create_color.execute(body.name, body.hex), status_code=201
    )


@color_router.patch("/<id>")
def update_color(id: str):
    current_user(color_router.current_event)
    body = parse_body(color_router.current_event, UpdateColorRequest)
    data = UpdateColorData(name=body.name, hex=body.hex)
    return result_response(container().update_color.execute(id, data))


@color_router.delete("/<id>")
def delete_color(id: str):
    current_user(color_router.current_event)
    return result_response(container().delete_color.execute(id))
