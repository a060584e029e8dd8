"""
인증 관련 API 엔드포인트

회원 가입, 로그인, 사용자 정보 및 목록 조회 기능을 제공합니다.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.api.deps import (
    get_auth_service,
    get_credential_store,
    get_current_user,
    get_token_data,
)
from catalog_api.services.auth_service import AuthService
from catalog_api.services.credential_store import CredentialStore
from catalog_api.schemas.auth import (
    UserRegisterRequest,
    UserLoginRequest,
    TokenResponse,
    UserResponse,
)
from catalog_api.core.exceptions import (
    InvalidCredentialsException,
    UserAlreadyExistsException,
)
from catalog_api.models.user import User


router = APIRouter()


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
def register(
    user_data: UserRegisterRequest,
    credentials: CredentialStore = Depends(get_credential_store),
):
    """
    새 사용자를 등록합니다.

    Raises:
        HTTPException 409: 이미 존재하는 사용자명 또는 이메일 (중복 검사 활성화 시)

    Example:
        Request:
        ```json
        {
            "username": "alice",
            "password": "secret1"
        }
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "name": null,
            "email": null,
            "username": "alice"
        }
        ```
    """
    try:
        user = credentials.register(
            username=user_data.username,
            password=user_data.password,
            user_id=user_data.id,
            name=user_data.name,
            email=user_data.email,
        )
        return user

    except UserAlreadyExistsException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    사용자 로그인 및 JWT 토큰 발급

    Raises:
        HTTPException 403: 잘못된 인증 정보 (사용자 없음과 비밀번호 불일치를 구분하지 않음)

    Example:
        Response (200):
        ```json
        {
            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "token_type": "bearer"
        }
        ```
    """
    try:
        access_token = auth_service.login(credentials.username, credentials.password)
    except InvalidCredentialsException as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message,
        )

    return TokenResponse(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: User = Depends(get_current_user),
):
    """
    현재 인증된 사용자의 정보를 조회합니다.

    Raises:
        HTTPException 401: 인증되지 않은 요청
    """
    return current_user


@router.get(
    "", response_model=list[UserResponse], dependencies=[Depends(get_token_data)]
)
def list_users(
    credentials: CredentialStore = Depends(get_credential_store),
):
    """
    등록된 사용자 목록을 등록 순서대로 조회합니다. 비밀번호 해시는 포함되지 않습니다.

    Raises:
        HTTPException 401: 인증되지 않은 요청
    """
    return credentials.list_users()
