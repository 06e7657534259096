from aws_lambda_powertools.event_handler.api_gateway import Router

from carpool.api.dependencies import container, current_user, parse_body
from carpool.driver.applications import CreateDriverInput
from carpool.driver.handlers.request_models import CreateDriverRequest
from carpool.shared.utils import result_response

router = Router()


@router.post("/")
def create_driver():
    """呼び出し元ユーザーを運転者として登録する"""
    claims = current_user(router.current_event)
    body = parse_body(router.current_event, CreateDriverRequest)
    result = container().create_driver.execute(
        CreateDriverInput(user_id=claims.user_id, driver_license=body.driver_license)
    )
    return result_response(result, status_code=201)
