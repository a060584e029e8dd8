"""
FastAPI 의존성 주입 함수들

애플리케이션 수명 동안 app.state에 보관된 서비스 객체와 인증 의존성을 제공합니다.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from catalog_api.core.exceptions import InvalidTokenException
from catalog_api.models.user import User
from catalog_api.schemas.auth import TokenData
from catalog_api.services.auth_service import AuthService
from catalog_api.services.credential_store import CredentialStore
from catalog_api.services.product_repository import ProductRepository


# OAuth2 토큰 스키마 설정
# 헤더 누락도 잘못된 토큰과 같은 401 응답으로 처리하기 위해 auto_error=False
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/v1/users/login", auto_error=False)


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store


def get_product_repository(request: Request) -> ProductRepository:
    return request.app.state.product_repository


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def _unauthorized(e: InvalidTokenException) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=e.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_data(
    token: str | None = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenData:
    """
    Bearer 토큰을 검증하는 의존성 함수

    사용자 저장소는 조회하지 않습니다. 토큰은 만료 전까지 서버 상태와 무관하게 유효합니다.

    Raises:
        HTTPException: 헤더 누락, 형식 오류, 서명 불일치, 만료 시 401 Unauthorized
            (원인과 관계없이 같은 메시지)
    """
    try:
        if not token:
            raise InvalidTokenException()
        return auth_service.verify_token(token)

    except InvalidTokenException as e:
        raise _unauthorized(e)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    JWT 토큰으로 현재 인증된 사용자를 조회하는 의존성 함수

    Example:
        @router.get("/me")
        def get_me(current_user: User = Depends(get_current_user)):
            return current_user
    """
    try:
        if not token:
            raise InvalidTokenException()
        return auth_service.get_current_user(token)

    except InvalidTokenException as e:
        raise _unauthorized(e)
