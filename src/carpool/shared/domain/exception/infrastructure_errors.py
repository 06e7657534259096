class InfrastructureError(Exception):
    """外部依存（DB・キャッシュ・メール等）の失敗を表す基底エラー

    cause はログ用であり、クライアントには code と message のみを返す。
    """

    code: str = "INFRASTRUCTURE_ERROR"

    def __init__(
        self, message: str, code: str | None = None, cause: BaseException | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.cause = cause


class RepositoryError(InfrastructureError):
    """永続化層のエラー"""

    code = "REPOSITORY_ERROR"


class DatabaseError(RepositoryError):
    """クエリ・更新の失敗"""

    code = "DATABASE_ERROR"


class ConnectionError(RepositoryError):
    """DB 接続の失敗"""

    code = "CONNECTION_ERROR"

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("Database connection failed", cause=cause)


class RelationConstraintError(RepositoryError):
    """他レコードから参照されているため削除できない場合"""

    code = "RELATION_CONSTRAINT"

    def __init__(self, entity: str, cause: BaseException | None = None) -> None:
        super().__init__(
            f"Cannot delete {entity} because it is still referenced by other records",
            cause=cause,
        )
        self.entity = entity


class ConstraintViolationError(RepositoryError):
    """DB 制約（一意制約・座席数制約）による書き込み拒否"""

    code = "CONSTRAINT_VIOLATION"

    def __init__(self, constraint: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Constraint violated: {constraint}", cause=cause)
        self.constraint = constraint


class CacheError(InfrastructureError):
    code = "CACHE_ERROR"


class EmailError(InfrastructureError):
    code = "EMAIL_DELIVERY_FAILED"


class PasswordError(InfrastructureError):
    code = "HASHING_FAILED"


class TokenError(InfrastructureError):
    code = "TOKEN_INVALID"
