from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDescriptor:
    """エラーコードに対応する HTTP ステータスと分類"""

    status_code: int
    category: str


INTERNAL_ERROR = ErrorDescriptor(500, "internal")

_REGISTRY: dict[str, ErrorDescriptor] = {
    # リクエスト
    "VALIDATION_ERROR": ErrorDescriptor(422, "validation"),
    "BAD_REQUEST": ErrorDescriptor(400, "validation"),
    # 認証・認可
    "UNAUTHORIZED": ErrorDescriptor(401, "authentication"),
    "INVALID_CREDENTIALS": ErrorDescriptor(401, "authentication"),
    "TOKEN_INVALID": ErrorDescriptor(401, "authentication"),
    "FORBIDDEN": ErrorDescriptor(403, "authorization"),
    # 存在しないリソース
    "USER_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "DRIVER_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "CAR_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "BRAND_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "MODEL_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "COLOR_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "CITY_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "TRAVEL_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "INSCRIPTION_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    "ROUTE_NOT_FOUND": ErrorDescriptor(404, "not_found"),
    # 重複
    "USER_ALREADY_EXISTS": ErrorDescriptor(409, "conflict"),
    "DRIVER_ALREADY_EXISTS": ErrorDescriptor(409, "conflict"),
    "CAR_ALREADY_EXISTS": ErrorDescriptor(409, "conflict"),
    "COLOR_ALREADY_EXISTS": ErrorDescriptor(409, "conflict"),
    "ALREADY_INSCRIBED": ErrorDescriptor(409, "conflict"),
    "CONSTRAINT_VIOLATION": ErrorDescriptor(409, "conflict"),
    "RELATION_CONSTRAINT": ErrorDescriptor(409, "conflict"),
    # ビジネスルール
    "NO_SEATS_AVAILABLE": ErrorDescriptor(400, "business_rule"),
    # インフラ
    "REPOSITORY_ERROR": ErrorDescriptor(500, "infrastructure"),
    "DATABASE_ERROR": ErrorDescriptor(500, "infrastructure"),
    "CONNECTION_ERROR": ErrorDescriptor(503, "infrastructure"),
    "CACHE_ERROR": ErrorDescriptor(500, "infrastructure"),
    "HASHING_FAILED": ErrorDescriptor(500, "infrastructure"),
    "EMAIL_DELIVERY_FAILED": ErrorDescriptor(502, "infrastructure"),
    "INTERNAL_ERROR": INTERNAL_ERROR,
}


def describe(code: str) -> ErrorDescriptor:
    """未登録のコードは INTERNAL_ERROR（500）として扱う"""
    return _REGISTRY.get(code, INTERNAL_ERROR)
