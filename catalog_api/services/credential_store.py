"""
사용자 자격 증명 저장소

등록된 사용자를 프로세스 메모리에 보관합니다. 재시작하면 모든 사용자가 사라집니다.
"""

import logging
import threading

from catalog_api.core.exceptions import UserAlreadyExistsException
from catalog_api.core.security import hash_password
from catalog_api.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """메모리 기반 사용자 저장소"""

    def __init__(self, bcrypt_rounds: int = 10, enforce_unique: bool = True):
        """
        Args:
            bcrypt_rounds: 비밀번호 해싱 cost factor
            enforce_unique: True면 중복 username/email 등록 시 예외 발생,
                False면 중복을 그대로 추가 (조회 시 먼저 등록된 사용자가 우선)
        """
        self._users: list[User] = []
        self._lock = threading.Lock()
        self.bcrypt_rounds = bcrypt_rounds
        self.enforce_unique = enforce_unique

    def __len__(self) -> int:
        return len(self._users)

    def register(
        self,
        username: str,
        password: str,
        user_id: int | None = None,
        name: str | None = None,
        email: str | None = None,
    ) -> User:
        """
        새 사용자를 등록합니다.

        Args:
            username: 사용자명
            password: 평문 비밀번호
            user_id: 사용자 ID (None이면 기존 최대 ID + 1)
            name: 표시 이름
            email: 이메일 주소

        Returns:
            User: 생성된 사용자 객체

        Raises:
            UserAlreadyExistsException: enforce_unique가 True이고
                username 또는 email이 이미 등록된 경우

        Example:
            >>> store = CredentialStore()
            >>> user = store.register("alice", "secret1")
            >>> user.username
            'alice'
        """
        # 해싱은 락 밖에서 수행
        hashed_password = hash_password(password, rounds=self.bcrypt_rounds)

        with self._lock:
            if self.enforce_unique and self._is_taken(username, email):
                raise UserAlreadyExistsException(username)

            if user_id is None:
                user_id = max((user.id for user in self._users), default=0) + 1

            user = User(
                id=user_id,
                name=name,
                email=email,
                username=username,
                hashed_password=hashed_password,
            )
            self._users.append(user)

        logger.info("Registered user '%s' (id=%s)", username, user_id)
        return user

    def find_by_username(self, username: str) -> User | None:
        """
        사용자명으로 사용자를 조회합니다 (대소문자 구분, 첫 번째 일치).

        Returns:
            User | None: 사용자 객체, 없으면 None
        """
        for user in self._users:
            if user.username == username:
                return user
        return None

    def list_users(self) -> list[User]:
        """등록 순서대로 전체 사용자 목록을 반환합니다."""
        return list(self._users)

    def _is_taken(self, username: str, email: str | None) -> bool:
        for user in self._users:
            if user.username == username:
                return True
            if email and user.email == email:
                return True
        return False
