"""
Product 모델

상품 JSON 파일의 레코드 형태와 동일합니다.
"""

from pydantic import BaseModel, Field


class Rating(BaseModel):
    """상품 평점 (평균 평점과 평가 수)"""

    rate: float = Field(default=0, allow_inf_nan=False)
    count: int = Field(default=0, ge=0)


class Product(BaseModel):
    """
    상품 모델

    Attributes:
        id: 상품 ID (조회 키, 중복 허용)
        title: 상품명
        price: 가격 (0 이상)
        description: 상품 설명
        category: 카테고리
        image: 이미지 URI
        rating: 평점 정보 (rate, count)
    """

    id: int
    title: str
    price: float = Field(ge=0, allow_inf_nan=False)
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = Field(default_factory=Rating)

    def __str__(self) -> str:
        return f"Product: {self.title}"
