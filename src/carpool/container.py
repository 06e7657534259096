from dataclasses import dataclass
from functools import lru_cache

import boto3
from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carpool.auth.applications import LoginUseCase, RegisterUseCase
from carpool.driver.applications import CreateDriverUseCase
from carpool.driver.infrastructure import CachedDriverRepository, SqlAlchemyDriverRepository
from carpool.inscription.applications import (
    CreateInscriptionUseCase,
    DeleteInscriptionUseCase,
    ListInscriptionsUseCase,
    ListTripPassengersUseCase,
    ListUserInscriptionsUseCase,
)
from carpool.inscription.infrastructure import (
    CachedInscriptionRepository,
    SqlAlchemyInscriptionRepository,
)
from carpool.shared.config import Settings
from carpool.shared.domain.service import CacheService, TokenService
from carpool.shared.infrastructure.cache import InMemoryCacheService, RedisCacheService
from carpool.shared.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from carpool.shared.infrastructure.email import SesEmailService
from carpool.shared.infrastructure.security import BcryptPasswordService, JoseTokenService
from carpool.travel.applications import (
    CreateCityUseCase,
    CreateTravelUseCase,
    DeleteCityUseCase,
    DeleteTravelUseCase,
    FindTravelsUseCase,
    GetTravelUseCase,
    ListCitiesUseCase,
    ListTravelsUseCase,
)
from carpool.travel.infrastructure import (
    CachedCityRepository,
    CachedTravelRepository,
    SqlAlchemyCityRepository,
    SqlAlchemyTravelRepository,
)
from carpool.user.applications import (
    AnonymizeUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from carpool.user.infrastructure import CachedUserRepository, SqlAlchemyUserRepository
from carpool.vehicle.applications import (
    CreateBrandUseCase,
    CreateCarUseCase,
    CreateColorUseCase,
    DeleteBrandUseCase,
    DeleteCarUseCase,
    DeleteColorUseCase,
    ListBrandsUseCase,
    ListCarsUseCase,
    ListColorsUseCase,
    UpdateCarUseCase,
    UpdateColorUseCase,
)
from carpool.vehicle.infrastructure import (
    CachedBrandRepository,
    CachedCarRepository,
    CachedColorRepository,
    CachedModelRepository,
    SqlAlchemyBrandRepository,
    SqlAlchemyCarRepository,
    SqlAlchemyColorRepository,
    SqlAlchemyModelRepository,
)


@dataclass(frozen=True)
class Container:
    """コンポジションルートで組み立てた依存関係"""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    cache: CacheService
    token_service: TokenService
    # auth
    register: RegisterUseCase
    login: LoginUseCase
    # user / driver
    get_user: GetUserUseCase
    list_users: ListUsersUseCase
    update_user: UpdateUserUseCase
    delete_user: DeleteUserUseCase
    anonymize_user: AnonymizeUserUseCase
    create_driver: CreateDriverUseCase
    # vehicle
    create_car: CreateCarUseCase
    list_cars: ListCarsUseCase
    update_car: UpdateCarUseCase
    delete_car: DeleteCarUseCase
    create_brand: CreateBrandUseCase
    list_brands: ListBrandsUseCase
    delete_brand: DeleteBrandUseCase
    create_color: CreateColorUseCase
    list_colors: ListColorsUseCase
    update_color: UpdateColorUseCase
    delete_color: DeleteColorUseCase
    # travel / city
    create_travel: CreateTravelUseCase
    get_travel: GetTravelUseCase
    list_travels: ListTravelsUseCase
    find_travels: FindTravelsUseCase
    delete_travel: DeleteTravelUseCase
    create_city: CreateCityUseCase
    list_cities: ListCitiesUseCase
    delete_city: DeleteCityUseCase
    # inscription
    create_inscription: CreateInscriptionUseCase
    delete_inscription: DeleteInscriptionUseCase
    list_inscriptions: ListInscriptionsUseCase
    list_user_inscriptions: ListUserInscriptionsUseCase
    list_trip_passengers: ListTripPassengersUseCase

    def database_healthy(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError:
            return False
        return True


def build_cache(settings: Settings) -> CacheService:
    """REDIS_URL が設定されていれば Redis、なければインメモリ"""
    if settings.redis_url:
        return RedisCacheService.from_url(settings.redis_url)
    return InMemoryCacheService()


def build_container(settings: Settings, cache: CacheService | None = None) -> Container:
    engine = create_db_engine(settings.database_url, echo=settings.database_echo)
    init_db(engine)
    session_factory = create_session_factory(engine)
    cache = cache or build_cache(settings)
    cache_config = settings.cache_config()

    def cached(decorator, inner):
        return decorator(inner, cache, cache_config)

    users = cached(CachedUserRepository, SqlAlchemyUserRepository(session_factory))
    drivers = cached(CachedDriverRepository, SqlAlchemyDriverRepository(session_factory))
    brands = cached(CachedBrandRepository, SqlAlchemyBrandRepository(session_factory))
    models = cached(CachedModelRepository, SqlAlchemyModelRepository(session_factory))
    colors = cached(CachedColorRepository, SqlAlchemyColorRepository(session_factory))
    cars = cached(CachedCarRepository, SqlAlchemyCarRepository(session_factory))
    cities = cached(CachedCityRepository, SqlAlchemyCityRepository(session_factory))
    travels = cached(CachedTravelRepository, SqlAlchemyTravelRepository(session_factory))
    inscriptions = cached(
        CachedInscriptionRepository, SqlAlchemyInscriptionRepository(session_factory)
    )

    password_service = BcryptPasswordService(rounds=settings.password_hash_rounds)
    token_service = JoseTokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.jwt_ttl_seconds,
    )
    email_client = (
        boto3.client("ses", region_name=settings.aws_region)
        if settings.email_enabled
        else None
    )
    email_service = SesEmailService(
        email_client, sender=settings.email_sender, enabled=settings.email_enabled
    )

    return Container(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        cache=cache,
        token_service=token_service,
        register=RegisterUseCase(users, password_service, token_service, email_service),
        login=LoginUseCase(users, password_service, token_service),
        get_user=GetUserUseCase(users),
        list_users=ListUsersUseCase(users),
        update_user=UpdateUserUseCase(users),
        delete_user=DeleteUserUseCase(users),
        anonymize_user=AnonymizeUserUseCase(users),
        create_driver=CreateDriverUseCase(drivers, users),
        create_car=CreateCarUseCase(cars, brands, models, colors),
        list_cars=ListCarsUseCase(cars),
        update_car=UpdateCarUseCase(cars, brands, models, colors),
        delete_car=DeleteCarUseCase(cars),
        create_brand=CreateBrandUseCase(brands),
        list_brands=ListBrandsUseCase(brands),
        delete_brand=DeleteBrandUseCase(brands),
        create_color=CreateColorUseCase(colors),
        list_colors=ListColorsUseCase(colors),
        update_color=UpdateColorUseCase(colors),
        delete_color=DeleteColorUseCase(colors),
        create_travel=CreateTravelUseCase(travels, drivers, cars, cities),
        get_travel=GetTravelUseCase(travels),
        list_travels=ListTravelsUseCase(travels),
        find_travels=FindTravelsUseCase(travels),
        delete_travel=DeleteTravelUseCase(travels, drivers),
        create_city=CreateCityUseCase(cities),
        list_cities=ListCitiesUseCase(cities),
        delete_city=DeleteCityUseCase(cities),
        create_inscription=CreateInscriptionUseCase(inscriptions, users, travels),
        delete_inscription=DeleteInscriptionUseCase(inscriptions),
        list_inscriptions=ListInscriptionsUseCase(inscriptions),
        list_user_inscriptions=ListUserInscriptionsUseCase(inscriptions, users),
        list_trip_passengers=ListTripPassengersUseCase(inscriptions, travels),
    )


@lru_cache(maxsize=1)
def get_container() -> Container:
    """Lambda 実行環境ごとに 1 度だけ組み立てる"""
    return build_container(Settings())
