"""
상품 관련 Pydantic 스키마

API 요청 모델을 정의합니다. 응답은 catalog_api.models.Product를 그대로 사용합니다.
"""

from pydantic import BaseModel, Field


class RatingRequest(BaseModel):
    """상품 생성 시 평점 정보"""

    rate: float = Field(
        0, allow_inf_nan=False, description="평균 평점", examples=[4.5]
    )
    count: int = Field(..., ge=1, description="평가 수 (1 이상)", examples=[150])


class ProductCreateRequest(BaseModel):
    """
    상품 생성 요청 스키마

    Example:
        {
            "id": 99,
            "title": "Widget",
            "price": 15.5,
            "description": "A useful widget",
            "category": "gadgets",
            "image": "http://example.com/widget.jpg",
            "rating": {"rate": 4, "count": 3}
        }
    """

    id: int = Field(..., description="상품 ID", examples=[99])
    title: str = Field(
        ...,
        min_length=3,
        max_length=50,
        description="상품명 (3-50자)",
        examples=["Widget"],
    )
    price: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="가격 (0 이상, 유한한 값)",
        examples=[15.5],
    )
    description: str = Field("", description="상품 설명")
    category: str = Field("", description="카테고리", examples=["gadgets"])
    image: str = Field("", description="이미지 URI")
    rating: RatingRequest


class ProductUpdateRequest(BaseModel):
    """
    상품 수정 요청 스키마

    전달된 필드만 변경합니다. count는 rating.count를 변경합니다.

    Example:
        {
            "price": 20,
            "count": 5
        }
    """

    title: str | None = Field(
        None, min_length=3, max_length=50, description="상품명 (3-50자)"
    )
    price: float | None = Field(
        None, ge=0, allow_inf_nan=False, description="가격 (0 이상)"
    )
    description: str | None = Field(None, description="상품 설명")
    category: str | None = Field(None, description="카테고리")
    image: str | None = Field(None, description="이미지 URI")
    rate: float | None = Field(None, allow_inf_nan=False, description="평균 평점")
    count: int | None = Field(None, ge=1, description="평가 수 (1 이상)")
