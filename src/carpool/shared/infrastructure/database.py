from __future__ import annotations

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from carpool.shared.domain.exception import (
    ConnectionError,
    DatabaseError,
    RelationConstraintError,
    RepositoryError,
)


# ---------- Declarative Base ----------
class Base(DeclarativeBase):
    pass


# ---------- Engine / Session ----------
def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """DATABASE_URL からエンジンを生成する（SQLite / PostgreSQL）"""
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql+psycopg://", 1)

    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False, "timeout": 30}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # インメモリ DB は接続ごとに別 DB になるため 1 接続を共有する
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """全テーブルを作成する（モデル import 後に呼び出す）"""
    from carpool.shared.infrastructure import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# ---------- Error translation ----------
def to_repository_error(action: str, error: SQLAlchemyError) -> RepositoryError:
    """SQLAlchemy の例外を RepositoryError に変換する"""
    if isinstance(error, DBAPIError) and error.connection_invalidated:
        return ConnectionError(cause=error)
    return DatabaseError(f"Failed to {action}", cause=error)


def to_delete_error(entity: str, error: SQLAlchemyError) -> RepositoryError:
    """削除時の例外を変換する（外部キー違反は RelationConstraintError）"""
    if isinstance(error, IntegrityError):
        return RelationConstraintError(entity, cause=error)
    return to_repository_error(f"delete {entity}", error)
