from dataclasses import dataclass, field

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class CacheTTLConfig:
    """ドメインごとのキャッシュ TTL（秒）"""

    brand: int = 3600
    color: int = 3600
    model: int = 1800
    city: int = 1800
    car: int = 600
    driver: int = 600
    user: int = 300
    travel: int = 300
    inscription: int = 120

    def for_domain(self, domain: str) -> int:
        return getattr(self, domain)


@dataclass(frozen=True)
class CacheConfig:
    enabled: bool = True
    key_prefix: str = "carpool:"
    ttl: CacheTTLConfig = field(default_factory=CacheTTLConfig)


class Settings(BaseSettings):
    """アプリケーション設定

    起動時に一度だけ生成し、コンポジションルートから各層へ渡す。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # データベース
    database_url: str = "sqlite:///./carpool.db"
    database_echo: bool = False

    # キャッシュ（REDIS_URL 未設定時はインメモリ）
    redis_url: str | None = None
    cache_enabled: bool = True
    cache_key_prefix: str = "carpool:"
    cache_ttl_brand: int = 3600
    cache_ttl_color: int = 3600
    cache_ttl_model: int = 1800
    cache_ttl_city: int = 1800
    cache_ttl_car: int = 600
    cache_ttl_driver: int = 600
    cache_ttl_user: int = 300
    cache_ttl_travel: int = 300
    cache_ttl_inscription: int = 120

    # JWT
    jwt_secret: str = Field(default="dev-secret", min_length=1)
    jwt_algorithm: str = "HS256"
    jwt_ttl_seconds: int = 60 * 60 * 24 * 7
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # メール（SES）
    email_enabled: bool = False
    email_sender: str = "no-reply@carpool.local"
    aws_region: str = "eu-west-3"

    def cache_config(self) -> CacheConfig:
        return CacheConfig(
            enabled=self.cache_enabled,
            key_prefix=self.cache_key_prefix,
            ttl=CacheTTLConfig(
                brand=self.cache_ttl_brand,
                color=self.cache_ttl_color,
                model=self.cache_ttl_model,
                city=self.cache_ttl_city,
                car=self.cache_ttl_car,
                driver=self.cache_ttl_driver,
                user=self.cache_ttl_user,
                travel=self.cache_ttl_travel,
                inscription=self.cache_ttl_inscription,
            ),
        )
