"""
원격 카탈로그 시드 테스트
"""

import json

import pytest
import requests

from catalog_api.core.exceptions import CatalogSeedException
from catalog_api.services import catalog_seeder
from catalog_api.services.catalog_seeder import seed_catalog



class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


def test_seed_writes_products(tmp_path, monkeypatch, sample_products):
    """원격 응답을 2칸 들여쓰기 JSON 파일로 저장"""
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(sample_products)

    monkeypatch.setattr(catalog_seeder.requests, "get", fake_get)
    path = tmp_path / "products.json"

    count = seed_catalog(path, "https://fakestoreapi.com/products/", timeout=5)

    assert count == len(sample_products)
    assert calls == [("https://fakestoreapi.com/products/", 5)]
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert [p["id"] for p in saved] == [1, 2, 3, 4]
    assert path.read_text(encoding="utf-8").startswith("[\n  {")


def test_seed_http_error(tmp_path, monkeypatch):
    monkeypatch.setattr(
        catalog_seeder.requests,
        "get",
        lambda url, timeout: FakeResponse({}, status_code=503),
    )
    path = tmp_path / "products.json"

    with pytest.raises(CatalogSeedException):
        seed_catalog(path, "https://example.com/products")
    assert not path.exists()


def test_seed_connection_error(tmp_path, monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(catalog_seeder.requests, "get", fake_get)

    with pytest.raises(CatalogSeedException) as exc_info:
        seed_catalog(tmp_path / "products.json", "https://example.com/products")

    assert "connection refused" in str(exc_info.value)


def test_seed_unexpected_body(tmp_path, monkeypatch):
    monkeypatch.setattr(
        catalog_seeder.requests,
        "get",
        lambda url, timeout: FakeResponse({"error": "not a list"}),
    )

    with pytest.raises(CatalogSeedException):
        seed_catalog(tmp_path / "products.json", "https://example.com/products")
