import logging
import math
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_api.api.routes import auth, products
from catalog_api.core.config import Settings, get_settings
from catalog_api.core.exceptions import CatalogSeedException
from catalog_api.services.auth_service import AuthService
from catalog_api.services.catalog_seeder import seed_catalog
from catalog_api.services.credential_store import CredentialStore
from catalog_api.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)


# 422 응답에 그대로 담기는 입력값 중 Infinity / NaN은 JSON으로 직렬화할 수 없으므로 문자열로 변환
_FINITE_FLOAT_ENCODER = {float: lambda v: v if math.isfinite(v) else str(v)}


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": jsonable_encoder(
                exc.errors(), custom_encoder=_FINITE_FLOAT_ENCODER
            )
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    FastAPI 애플리케이션 생성

    settings를 생략하면 시작 시점에 환경 변수(.env)에서 읽습니다.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_settings = settings or get_settings()
        logging.basicConfig(level=app_settings.log_level.upper())

        path = app_settings.products_path
        if app_settings.products_seed_url and not path.exists():
            try:
                seed_catalog(
                    path,
                    app_settings.products_seed_url,
                    timeout=app_settings.seed_timeout_seconds,
                )
            except CatalogSeedException as e:
                logger.error("%s", e.message)

        # 프로세스 수명 동안 사용할 서비스 객체 생성 및 명시적 초기화
        credential_store = CredentialStore(
            bcrypt_rounds=app_settings.bcrypt_rounds,
            enforce_unique=app_settings.enforce_unique_usernames,
        )
        repository = ProductRepository(path)
        repository.initialize()

        app.state.settings = app_settings
        app.state.credential_store = credential_store
        app.state.product_repository = repository
        app.state.auth_service = AuthService(credential_store, app_settings)

        logger.info("Catalog API started in %s mode", app_settings.app_env)
        yield

        del app.state.auth_service
        del app.state.product_repository
        del app.state.credential_store

    app = FastAPI(
        title="Product Catalog API",
        description="JSON 파일 기반 상품 카탈로그 CRUD 및 JWT 인증 API",
        version="1.0.0",
        lifespan=lifespan,
    )

    cors_origins = settings.cors_origin_list if settings else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 라우터 등록
    app.include_router(auth.router, prefix="/v1/users", tags=["authentication"])
    app.include_router(products.router, prefix="/v1", tags=["products"])

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return {
            "message": "Product Catalog API",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """헬스체크 엔드포인트 (Docker 헬스체크용)"""
        return {"status": "healthy"}

    return app


app = create_app()
