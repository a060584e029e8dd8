"""
인증 서비스

로그인, JWT 토큰 발급/검증, 토큰 기반 사용자 조회 기능을 제공합니다.
"""

import logging

import jwt

from catalog_api.core.config import Settings
from catalog_api.core.security import (
    create_access_token,
    verify_access_token,
    verify_password,
)
from catalog_api.core.exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
)
from catalog_api.models.user import User
from catalog_api.schemas.auth import TokenData
from catalog_api.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    def __init__(self, credentials: CredentialStore, settings: Settings):
        self.credentials = credentials
        self.settings = settings

    def issue_token(self, username: str) -> str:
        """
        username 클레임(sub)을 담은 액세스 토큰을 발급합니다.

        만료 시간은 settings.jwt_expiration_minutes (기본 60분)입니다.
        """
        return create_access_token({"sub": username}, self.settings)

    def verify_token(self, token: str) -> TokenData:
        """
        토큰의 서명과 만료 시간을 검증합니다.

        Args:
            token: JWT 액세스 토큰

        Returns:
            TokenData: 토큰에 담긴 username

        Raises:
            InvalidTokenException: 형식 오류, 서명 불일치, 만료, sub 누락 등
                모든 실패에 대해 같은 메시지로 발생

        Example:
            >>> token = service.issue_token("alice")
            >>> service.verify_token(token).username
            'alice'
        """
        try:
            payload = verify_access_token(token, self.settings)
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired token")
            raise InvalidTokenException()
        except jwt.InvalidTokenError as e:
            logger.warning("Rejected invalid token: %s", e)
            raise InvalidTokenException()

        username = payload.get("sub")
        if not username:
            raise InvalidTokenException()

        return TokenData(username=username)

    def authenticate_user(self, username: str, password: str) -> User | None:
        """
        사용자 인증을 수행합니다.

        Returns:
            User | None: 인증 성공 시 User 객체, 실패 시 None
        """
        user = self.credentials.find_by_username(username)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    def login(self, username: str, password: str) -> str:
        """
        자격 증명을 확인하고 액세스 토큰을 발급합니다.

        Raises:
            InvalidCredentialsException: 사용자가 없거나 비밀번호가 틀린 경우
                (두 경우 모두 같은 메시지)
        """
        user = self.authenticate_user(username, password)
        if not user:
            logger.warning("Failed login attempt for '%s'", username)
            raise InvalidCredentialsException()

        logger.info("User '%s' logged in", username)
        return self.issue_token(user.username)

    def get_current_user(self, token: str) -> User:
        """
        JWT 토큰에서 현재 사용자를 조회합니다.

        Raises:
            InvalidTokenException: 토큰이 유효하지 않거나, 토큰의 사용자가
                더 이상 저장소에 없는 경우 (서버 재시작 등)
        """
        token_data = self.verify_token(token)
        user = self.credentials.find_by_username(token_data.username)
        if not user:
            raise InvalidTokenException()
        return user
