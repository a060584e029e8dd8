"""원격 카탈로그로 상품 파일 초기화."""

import json
import logging
from pathlib import Path

import requests
from pydantic import TypeAdapter, ValidationError

from catalog_api.core.exceptions import CatalogSeedException
from catalog_api.models.product import Product

logger = logging.getLogger(__name__)

_product_list = TypeAdapter(list[Product])


def seed_catalog(path: Path, url: str, timeout: float = 10) -> int:
    """
    원격 API(fakestoreapi 형식의 JSON 배열)에서 상품을 받아 파일로 저장합니다.

    Args:
        path: 저장할 상품 파일 경로
        url: 상품 목록 URL (예: https://fakestoreapi.com/products/)
        timeout: HTTP 요청 타임아웃 (초)

    Returns:
        저장된 상품 수

    Raises:
        CatalogSeedException: 요청 실패, 응답 형식 오류 시
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        products = _product_list.validate_python(response.json())
    except requests.RequestException as e:
        raise CatalogSeedException(url, str(e)) from e
    except (ValueError, ValidationError) as e:
        raise CatalogSeedException(url, f"unexpected response body: {e}") from e

    data = [product.model_dump(mode="json") for product in products]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("Seeded %d products from %s into %s", len(products), url, path)
    return len(products)
