"""
pytest 픽스처 정의
"""

import json

import pytest
from fastapi.testclient import TestClient

from catalog_api.core.config import Settings
from catalog_api.main import create_app
from catalog_api.services.auth_service import AuthService
from catalog_api.services.credential_store import CredentialStore
from catalog_api.services.product_repository import ProductRepository


SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 2,
        "title": "Mens Casual T-Shirt",
        "price": 15.0,
        "description": "Slim-fitting style",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "rating": {"rate": 4.1, "count": 259},
    },
    {
        "id": 3,
        "title": "Cotton Jacket",
        "price": 20.0,
        "description": "Great outerwear jackets",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
        "rating": {"rate": 4.7, "count": 500},
    },
    {
        "id": 4,
        "title": "Solid Gold Petite Micropave",
        "price": 9.99,
        "description": "Satisfaction guaranteed",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_.jpg",
        "rating": {"rate": 3.9, "count": 70},
    },
]


@pytest.fixture
def sample_products():
    """fakestoreapi 형식의 샘플 상품 목록 (복사본)"""
    return json.loads(json.dumps(SAMPLE_PRODUCTS))


@pytest.fixture
def products_file(tmp_path, sample_products):
    """샘플 상품이 기록된 임시 JSON 파일"""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_products, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def settings(products_file):
    """테스트용 설정 객체 픽스처"""
    return Settings(
        jwt_secret_key="test-secret-key-for-testing",
        jwt_algorithm="HS256",
        jwt_expiration_minutes=60,
        bcrypt_rounds=4,  # 테스트 속도를 위해 최소 cost factor 사용
        enforce_unique_usernames=True,
        products_file=str(products_file),
        products_seed_url="",
    )


@pytest.fixture
def credential_store(settings):
    """빈 사용자 저장소"""
    return CredentialStore(
        bcrypt_rounds=settings.bcrypt_rounds,
        enforce_unique=settings.enforce_unique_usernames,
    )


@pytest.fixture
def auth_service(credential_store, settings):
    return AuthService(credential_store, settings)


@pytest.fixture
def repository(products_file):
    """샘플 파일을 적재한 상품 저장소"""
    repo = ProductRepository(products_file)
    repo.initialize()
    return repo


@pytest.fixture
def test_client(settings):
    """각 테스트마다 새 애플리케이션 상태를 가진 TestClient"""
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(test_client):
    """인증 토큰을 포함한 헤더를 반환하는 픽스처"""
    register_response = test_client.post(
        "/v1/users/register",
        json={"username": "testuser", "password": "password123"},
    )
    assert register_response.status_code == 201

    login_response = test_client.post(
        "/v1/users/login",
        json={"username": "testuser", "password": "password123"},
    )
    assert login_response.status_code == 200

    token = login_response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
