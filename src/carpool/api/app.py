from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.event_handler.exceptions import NotFoundError, UnauthorizedError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from carpool.api.dependencies import container
from carpool.auth.handlers.routes import router as auth_router
from carpool.driver.handlers.routes import router as driver_router
from carpool.inscription.handlers.routes import router as inscription_router
from carpool.shared.utils import api_response, error_response, get_logger
from carpool.travel.handlers.routes import city_router, travel_router
from carpool.user.handlers.routes import router as user_router
from carpool.vehicle.handlers.routes import brand_router, car_router, color_router

logger = get_logger("carpool-api")

app = APIGatewayHttpResolver()
app.include_router(auth_router, prefix="/v1/auth")
app.include_router(user_router, prefix="/v1/users")
app.include_router(driver_router, prefix="/v1/drivers")
app.include_router(car_router, prefix="/v1/cars")
app.include_router(brand_router, prefix="/v1/brands")
app.include_router(color_router, prefix="/v1/colors")
app.include_router(city_router, prefix="/v1/cities")
app.include_router(travel_router, prefix="/v1/travels")
app.include_router(inscription_router, prefix="/v1/inscriptions")


@app.get("/v1/health")
def health():
    """DB とキャッシュの疎通を返す"""
    deps = container()
    database = deps.database_healthy()
    cache = deps.cache.is_healthy()
    status = "ok" if database and cache else "degraded"
    return api_response(
        200 if database else 503,
        {
            "success": database,
            "data": {"status": status, "database": database, "cache": cache},
        },
    )


@app.exception_handler(ValidationError)
def handle_validation_error(ex: ValidationError):
    errors = ex.errors(include_url=False, include_context=False, include_input=False)
    logger.info("Request validation failed", extra={"errors": errors})
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
        for error in errors
    )
    return error_response("VALIDATION_ERROR", message)


@app.exception_handler(UnauthorizedError)
def handle_unauthorized(ex: UnauthorizedError):
    return error_response("UNAUTHORIZED", ex.msg)


@app.not_found
def handle_not_found(ex: NotFoundError):
    return error_response("ROUTE_NOT_FOUND", "Route not found")


@app.exception_handler(Exception)
def handle_unexpected_error(ex: Exception):
    logger.exception("Unhandled error while processing request")
    return error_response("INTERNAL_ERROR", "Internal server error")


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """Carpool API Lambda Handler（API Gateway HTTP API）"""
    return app.resolve(event, context)
