"""
사용자 저장소 테스트
"""

import pytest

from catalog_api.core.exceptions import UserAlreadyExistsException
from catalog_api.core.security import verify_password
from catalog_api.models.user import User
from catalog_api.services.credential_store import CredentialStore


class TestRegister:
    """회원 가입 테스트 클래스"""

    def test_register_success(self, credential_store):
        """회원 가입 성공 테스트"""
        user = credential_store.register(
            "alice", "secret1", user_id=7, name="Alice", email="alice@example.com"
        )

        assert isinstance(user, User)
        assert user.id == 7
        assert user.name == "Alice"
        assert user.email == "alice@example.com"
        assert user.username == "alice"
        assert len(credential_store) == 1

    def test_password_is_hashed(self, credential_store):
        """비밀번호가 해싱되어 저장되는지 테스트"""
        user = credential_store.register("alice", "secret1")

        assert user.hashed_password != "secret1"
        assert user.hashed_password.startswith("$2b$")
        assert verify_password("secret1", user.hashed_password) is True

    def test_register_assigns_sequential_ids(self, credential_store):
        """id를 생략하면 기존 최대 id + 1을 부여"""
        first = credential_store.register("alice", "secret1")
        credential_store.register("bob", "secret2", user_id=10)
        third = credential_store.register("carol", "secret3")

        assert first.id == 1
        assert third.id == 11

    def test_register_duplicate_username_rejected(self, credential_store):
        """중복 검사 활성화 시 같은 username 재등록은 예외"""
        credential_store.register("alice", "secret1")

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            credential_store.register("alice", "other")

        assert "alice" in str(exc_info.value)
        assert len(credential_store) == 1

    def test_register_duplicate_email_rejected(self, credential_store):
        """중복 검사 활성화 시 같은 email 재등록은 예외"""
        credential_store.register("alice", "secret1", email="a@example.com")

        with pytest.raises(UserAlreadyExistsException):
            credential_store.register("alice2", "secret1", email="a@example.com")

    def test_register_duplicate_allowed_when_not_enforced(self):
        """중복 검사 비활성화 시 중복 등록도 성공하고, 조회는 먼저 등록된 사용자"""
        store = CredentialStore(bcrypt_rounds=4, enforce_unique=False)

        first = store.register("alice", "secret1")
        store.register("alice", "other")

        assert len(store) == 2
        assert store.find_by_username("alice") is first


class TestFindByUsername:
    """사용자 조회 테스트 클래스"""

    def test_find_existing_user(self, credential_store):
        registered = credential_store.register("alice", "secret1")

        assert credential_store.find_by_username("alice") is registered

    def test_find_is_case_sensitive(self, credential_store):
        """대소문자가 다르면 다른 사용자"""
        credential_store.register("alice", "secret1")

        assert credential_store.find_by_username("Alice") is None

    def test_find_nonexistent_user(self, credential_store):
        assert credential_store.find_by_username("nobody") is None

    def test_list_users_in_registration_order(self, credential_store):
        credential_store.register("alice", "secret1")
        credential_store.register("bob", "secret2")

        assert [u.username for u in credential_store.list_users()] == ["alice", "bob"]
