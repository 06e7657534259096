class DomainError(Exception):
    """ドメイン層で発生する基底エラー

    例外として送出せず、Err の値として返す。
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


class ResourceNotFoundError(DomainError):
    """リソースが見つからない場合"""

    resource: str = "Resource"

    def __init__(self, identifier: str) -> None:
        super().__init__(f"{self.resource} not found: {identifier}")
        self.identifier = identifier


class DuplicateResourceError(DomainError):
    """リソースの重複エラー"""

    pass


class BusinessRuleViolationError(DomainError):
    """ビジネスルールに違反した場合"""

    pass


class UserNotFoundError(ResourceNotFoundError):
    code = "USER_NOT_FOUND"
    resource = "User"


class DriverNotFoundError(ResourceNotFoundError):
    code = "DRIVER_NOT_FOUND"
    resource = "Driver"


class CarNotFoundError(ResourceNotFoundError):
    code = "CAR_NOT_FOUND"
    resource = "Car"


class BrandNotFoundError(ResourceNotFoundError):
    code = "BRAND_NOT_FOUND"
    resource = "Brand"


class ModelNotFoundError(ResourceNotFoundError):
    code = "MODEL_NOT_FOUND"
    resource = "Model"


class ColorNotFoundError(ResourceNotFoundError):
    code = "COLOR_NOT_FOUND"
    resource = "Color"


class CityNotFoundError(ResourceNotFoundError):
    code = "CITY_NOT_FOUND"
    resource = "City"


class TravelNotFoundError(ResourceNotFoundError):
    code = "TRAVEL_NOT_FOUND"
    resource = "Travel"


class InscriptionNotFoundError(ResourceNotFoundError):
    code = "INSCRIPTION_NOT_FOUND"
    resource = "Inscription"


class UserAlreadyExistsError(DuplicateResourceError):
    code = "USER_ALREADY_EXISTS"

    def __init__(self, email: str) -> None:
        super().__init__(f'A user with email "{email}" already exists')


class DriverAlreadyExistsError(DuplicateResourceError):
    code = "DRIVER_ALREADY_EXISTS"

    def __init__(self, user_id: str) -> None:
        super().__init__(f'A driver already exists for user "{user_id}"')


class CarAlreadyExistsError(DuplicateResourceError):
    code = "CAR_ALREADY_EXISTS"

    def __init__(self, license_plate: str) -> None:
        super().__init__(f'A car with license plate "{license_plate}" already exists')


class ColorAlreadyExistsError(DuplicateResourceError):
    code = "COLOR_ALREADY_EXISTS"

    def __init__(self, name: str) -> None:
        super().__init__(f"Color already exists: {name}")


class AlreadyInscribedError(DuplicateResourceError):
    """同一ユーザーが同じ旅程に二重登録しようとした場合"""

    code = "ALREADY_INSCRIBED"

    def __init__(self, user_id: str, trip_id: str) -> None:
        super().__init__(f"User {user_id} is already inscribed to travel {trip_id}")
        self.user_id = user_id
        self.trip_id = trip_id


class NoSeatsAvailableError(BusinessRuleViolationError):
    """旅程の座席が埋まっている場合"""

    code = "NO_SEATS_AVAILABLE"

    def __init__(self, trip_id: str) -> None:
        super().__init__(f"No seats available on travel {trip_id}")
        self.trip_id = trip_id


class InvalidCredentialsError(DomainError):
    code = "INVALID_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class ForbiddenError(DomainError):
    """リソースの所有者以外が操作しようとした場合"""

    code = "FORBIDDEN"

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"Not allowed to modify {resource} {identifier}")
