from typing import TypeVar

from aws_lambda_powertools.event_handler.exceptions import UnauthorizedError
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import BaseModel

from carpool.container import Container, get_container
from carpool.shared.domain import PaginationParams
from carpool.shared.domain.service import TokenClaims

M = TypeVar("M", bound=BaseModel)


def container() -> Container:
    return get_container()


def current_user(event: APIGatewayProxyEventV2) -> TokenClaims:
    """Authorization: Bearer <jwt> から呼び出し元を取り出す"""
    header = event.get_header_value(name="Authorization", default_value="") or ""
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Missing bearer token")

    verified = container().token_service.verify(token.strip())
    if not verified.success:
        raise UnauthorizedError(verified.error.message)
    return verified.value


def pagination(event: APIGatewayProxyEventV2) -> PaginationParams:
    """クエリ文字列の page / limit を読み取る（不正な値は ValidationError）"""
    params = {}
    for name in ("page", "limit"):
        value = event.get_query_string_value(name=name, default_value=None)
        if value is not None:
            params[name] = value
    return PaginationParams.model_validate(params)


def parse_body(event: APIGatewayProxyEventV2, model: type[M]) -> M:
    """リクエストボディを検証する（不正な JSON も ValidationError）"""
    return model.model_validate_json(event.decoded_body or "{}")


def parse_query(event: APIGatewayProxyEventV2, model: type[M]) -> M:
    return model.model_validate(event.query_string_parameters or {})
