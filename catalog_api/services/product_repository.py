"""
상품 저장소

상품 목록을 메모리에 보관하고, 변경이 일어날 때마다 JSON 파일 전체를 다시 씁니다.
"""

import json
import logging
import threading
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from catalog_api.core.exceptions import ProductStoreException
from catalog_api.models.product import Product

logger = logging.getLogger(__name__)

_product_list = TypeAdapter(list[Product])


class ProductRepository:
    """
    JSON 파일 기반 상품 저장소

    - initialize()로 파일을 한 번만 읽습니다. 이후 외부에서 파일을 수정해도
      재시작 전까지 반영되지 않습니다.
    - add/update/delete 후 전체 목록을 파일에 덮어씁니다.
      임시 파일 후 rename 방식이 아니므로 쓰기 도중 중단되면 파일이 손상될 수 있습니다.
    - id 중복은 검사하지 않으며, 조회 시 첫 번째 일치 항목을 반환합니다.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._products: list[Product] = []
        self._loaded = False
        self._lock = threading.RLock()

    @property
    def loaded(self) -> bool:
        """파일에서 상품을 읽어왔는지 여부"""
        return self._loaded

    def initialize(self) -> int:
        """
        상품 파일을 읽어 메모리에 적재합니다.

        파일이 없으면 빈 목록으로 시작합니다. 이미 적재된 경우 다시 읽지 않습니다.

        Returns:
            적재된 상품 수

        Raises:
            ProductStoreException: 파일을 읽을 수 없거나 형식이 잘못된 경우
        """
        with self._lock:
            if self._loaded:
                return len(self._products)

            if not self.path.exists():
                logger.warning(
                    "Product file %s does not exist, starting with an empty catalog",
                    self.path,
                )
                self._products = []
            else:
                try:
                    raw = self.path.read_bytes().decode("utf-8")
                    self._products = _product_list.validate_json(raw)
                except OSError as e:
                    raise ProductStoreException(str(self.path), str(e)) from e
                except (UnicodeDecodeError, ValidationError) as e:
                    raise ProductStoreException(str(self.path), str(e)) from e

            self._loaded = True
            logger.info("Loaded %d products from %s", len(self._products), self.path)
            return len(self._products)

    def load_all(self) -> list[Product]:
        """파일 순서대로 전체 상품 목록을 반환합니다."""
        self._ensure_loaded()
        return list(self._products)

    def filter(
        self,
        min_price: float | None = None,
        max_price: float | None = None,
        min_count: int | None = None,
        max_count: int | None = None,
    ) -> list[Product]:
        """
        가격과 평가 수(rating.count) 범위로 상품을 필터링합니다.

        모든 경계는 포함(inclusive)이며, None인 경계는 제한하지 않습니다.
        전달된 조건은 모두 AND로 결합됩니다.

        Args:
            min_price: 최소 가격
            max_price: 최대 가격
            min_count: 최소 평가 수
            max_count: 최대 평가 수

        Returns:
            조건을 만족하는 상품 리스트 (없으면 빈 리스트)
        """
        self._ensure_loaded()
        return [
            product
            for product in self._products
            if (min_price is None or product.price >= min_price)
            and (max_price is None or product.price <= max_price)
            and (min_count is None or product.rating.count >= min_count)
            and (max_count is None or product.rating.count <= max_count)
        ]

    def get_by_id(self, product_id: int) -> Product | None:
        """
        상품 ID로 상품을 조회합니다.

        Returns:
            첫 번째로 일치하는 Product, 없으면 None
        """
        self._ensure_loaded()
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, product: Product) -> None:
        """상품을 목록 끝에 추가하고 파일을 다시 씁니다. id 중복은 검사하지 않습니다."""
        with self._lock:
            self._ensure_loaded()
            self._products.append(product)
            self._save()

    def update(self, product: Product) -> bool:
        """
        같은 id를 가진 첫 번째 상품을 교체하고 파일을 다시 씁니다.

        Returns:
            교체했으면 True. 일치하는 상품이 없으면 아무것도 하지 않고 False
        """
        with self._lock:
            self._ensure_loaded()
            for index, existing in enumerate(self._products):
                if existing.id == product.id:
                    self._products[index] = product
                    self._save()
                    return True
            return False

    def delete(self, product_id: int) -> int:
        """
        id가 일치하는 모든 상품을 삭제하고 파일을 다시 씁니다.

        삭제할 상품이 없어도 파일은 항상 다시 씁니다.

        Returns:
            삭제된 상품 수
        """
        with self._lock:
            self._ensure_loaded()
            before = len(self._products)
            self._products = [p for p in self._products if p.id != product_id]
            self._save()
            return before - len(self._products)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.initialize()

    def _save(self) -> None:
        data = [product.model_dump(mode="json") for product in self._products]
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
