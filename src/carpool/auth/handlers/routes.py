from aws_lambda_powertools.event_handler.api_gateway import Router

from carpool.api.dependencies import container, parse_body
from carpool.auth.applications import LoginInput, RegisterInput
from carpool.auth.handlers.request_models import LoginRequest, RegisterRequest
from carpool.shared.utils import result_response

router = Router()


@router.post("/register")
def register():
    """ユーザー登録（認証トークンを返す）"""
    body = parse_body(router.current_event, RegisterRequest)
    result = container().register.execute(RegisterInput(**body.model_dump()))
    return result_response(result, status_code=201)


@router.post("/login")
def login():
    body = parse_body(router.current_event, LoginRequest)
    result = container().login.execute(LoginInput(email=body.email, password=body.password))
    return result_response(result)
