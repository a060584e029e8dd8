"""
도메인 모델

모든 모델을 이 모듈에서 import하여 export합니다.
"""

from catalog_api.models.user import User
from catalog_api.models.product import Product, Rating

__all__ = ["User", "Product", "Rating"]
