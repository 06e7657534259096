from aws_lambda_powertools.event_handler.api_gateway import Router

from carpool.api.dependencies import container, current_user, pagination, parse_body
from carpool.shared.domain.exception import ForbiddenError
from carpool.shared.domain.service import TokenClaims
from carpool.shared.utils import error_response, result_response
from carpool.user.domain.entity import UpdateUserData
from carpool.user.domain.enum import UserRole
from carpool.user.handlers.request_models import UpdateUserRequest

router = Router()


def _forbidden_unless_self(claims: TokenClaims, user_id: str):
    """本人または管理者以外の操作を拒否する"""
    if claims.user_id == user_id or claims.role == UserRole.ADMIN.value:
        return None
    error = ForbiddenError("user", user_id)
    return error_response(error.code, error.message)


@router.get("/")
def list_users():
    current_user(router.current_event)
    return result_response(container().list_users.execute(pagination(router.current_event)))


@router.get("/<id>")
def get_user(id: str):
    current_user(router.current_event)
    return result_response(container().get_user.execute(id))


@router.patch("/<id>")
def update_user(id: str):
    denied = _forbidden_unless_self(current_user(router.current_event), id)
    if denied:
        return denied
    body = parse_body(router.current_event, UpdateUserRequest)
    data = UpdateUserData(**body.model_dump())
    return result_response(container().update_user.execute(id, data))


@router.delete("/<id>")
def delete_user(id: str):
    denied = _forbidden_unless_self(current_user(router.current_event), id)
    if denied:
        return denied
    return result_response(container().delete_user.execute(id))


@router.post("/<id>/anonymize")
def anonymize_user(id: str):
    denied = _forbidden_unless_self(current_user(router.current_event), id)
    if denied:
        return denied
    return result_response(container().anonymize_user.execute(id))
