"""
Product 모델 테스트
"""

import pytest
from pydantic import ValidationError

from catalog_api.models.product import Product, Rating


class TestProductModel:
    """Product 모델 테스트 클래스"""

    def test_create_product_with_all_fields(self, sample_products):
        product = Product.model_validate(sample_products[0])

        assert product.id == 1
        assert product.title == "Fjallraven Backpack"
        assert product.price == 109.95
        assert product.rating == Rating(rate=3.9, count=120)

    def test_optional_fields_default(self):
        """description, category, image, rating은 생략 가능"""
        product = Product(id=1, title="Bare", price=0)

        assert product.description == ""
        assert product.category == ""
        assert product.image == ""
        assert product.rating == Rating(rate=0, count=0)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(id=1, title="Bad", price=-0.01)

    def test_negative_rating_count_rejected(self):
        with pytest.raises(ValidationError):
            Product(id=1, title="Bad", price=1, rating={"rate": 1, "count": -1})

    def test_dump_matches_file_shape(self, sample_products):
        """파일 레코드와 같은 키 순서로 직렬화"""
        product = Product.model_validate(sample_products[0])

        assert list(product.model_dump(mode="json")) == [
            "id",
            "title",
            "price",
            "description",
            "category",
            "image",
            "rating",
        ]

    def test_str(self):
        assert str(Product(id=1, title="Widget", price=1)) == "Product: Widget"

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(ValidationError):
            Product(id=1, title="Bad", price=price)

    @pytest.mark.parametrize("rate", [float("-inf"), float("nan")])
    def test_non_finite_rate_rejected(self, rate):
        with pytest.raises(ValidationError):
            Rating(rate=rate, count=1)
