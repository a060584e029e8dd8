"""
Pydantic 스키마 모듈
"""

from catalog_api.schemas.auth import (
    UserRegisterRequest,
    UserLoginRequest,
    TokenResponse,
    TokenData,
    UserResponse,
)
from catalog_api.schemas.product import (
    RatingRequest,
    ProductCreateRequest,
    ProductUpdateRequest,
)

__all__ = [
    "UserRegisterRequest",
    "UserLoginRequest",
    "TokenResponse",
    "TokenData",
    "UserResponse",
    "RatingRequest",
    "ProductCreateRequest",
    "ProductUpdateRequest",
]
