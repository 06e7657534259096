from aws_lambda_powertools.event_handler.api_gateway import Router

from carpool.api.dependencies import container, current_user, pagination, parse_body
from carpool.inscription.applications import CreateInscriptionInput
from carpool.inscription.handlers.request_models import CreateInscriptionRequest
from carpool.shared.utils import result_response

router = Router()


@router.get("/")
def list_inscriptions():
    current_user(router.current_event)
    return result_response(
        container().list_inscriptions.execute(pagination(router.current_event))
    )


@router.post("/")
def create_inscription():
    """座席を予約する（乗客は認証トークンのユーザー）"""
    claims = current_user(router.current_event)
    body = parse_body(router.current_event, CreateInscriptionRequest)
    result = container().create_inscription.execute(
        CreateInscriptionInput(user_id=claims.user_id, trip_id=body.trip_id)
    )
    return result_response(result, status_code=201)


@router.get("/me")
def list_my_inscriptions():
    claims = current_user(router.current_event)
    result = container().list_user_inscriptions.execute(
        claims.user_id, pagination(router.current_event)
    )
    return result_response(result)


@router.delete("/<id>")
def delete_inscription(id: str):
    claims = current_user(router.current_event)
    return result_response(container().delete_inscription.execute(id, claims.user_id))
