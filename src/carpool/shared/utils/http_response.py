import json
from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response, content_types
from pydantic_core import to_jsonable_python

from carpool.shared.domain import Paginated, Result
from carpool.shared.domain.exception import InfrastructureError

from .error_registry import describe

logger = Logger(child=True)


def api_response(status_code: int, body: dict) -> Response:
    """API Gateway HTTP API のレスポンスを生成する"""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(to_jsonable_python(body, by_alias=True), default=str),
    )


def success_response(data: Any, status_code: int = 200) -> Response:
    """{"success": true, "data": ...} 形式の成功レスポンス"""
    if isinstance(data, Paginated):
        return api_response(
            status_code, {"success": True, "data": data.data, "meta": data.meta}
        )
    return api_response(status_code, {"success": True, "data": data})


def error_response(code: str, message: str) -> Response:
    """{"success": false, "error": {...}} 形式のエラーレスポンス

    ステータスコードはエラーレジストリから決定する。
    """
    return api_response(
        describe(code).status_code,
        {"success": False, "error": {"code": code, "message": message}},
    )


def result_response(result: Result[Any, Any], status_code: int = 200) -> Response:
    """ユースケースの Result をレスポンスに変換する"""
    if result.success:
        return success_response(result.value, status_code)

    error = result.error
    if isinstance(error, InfrastructureError):
        logger.error(
            "Request failed with infrastructure error",
            extra={"code": error.code, "cause": repr(error.cause)},
        )
    else:
        logger.info("Request rejected", extra={"code": error.code})
    return error_response(error.code, error.message)
