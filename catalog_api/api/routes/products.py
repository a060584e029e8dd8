"""
상품 카탈로그 API 엔드포인트

상품 목록 조회(가격/평가 수 필터), 생성, 단건 조회, 수정, 삭제 기능을 제공합니다.
모든 엔드포인트는 Bearer 토큰 인증이 필요합니다.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from catalog_api.api.deps import get_product_repository, get_token_data
from catalog_api.core.exceptions import ProductNotFoundException
from catalog_api.models.product import Product, Rating
from catalog_api.schemas.product import ProductCreateRequest, ProductUpdateRequest
from catalog_api.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_token_data)])


def _get_or_404(product_id: int, repository: ProductRepository) -> Product:
    product = repository.get_by_id(product_id)
    if product is None:
        logger.warning("Product not found with ID: %s", product_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ProductNotFoundException(product_id).message,
        )
    return product


@router.get("/products", response_model=list[Product])
def list_products(
    min_price: float | None = Query(None, alias="minPrice", description="최소 가격"),
    max_price: float | None = Query(None, alias="maxPrice", description="최대 가격"),
    min_stock: int | None = Query(
        None, alias="minStock", description="최소 평가 수 (rating.count)"
    ),
    max_stock: int | None = Query(
        None, alias="maxStock", description="최대 평가 수 (rating.count)"
    ),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    상품 목록을 조회합니다.

    쿼리 파라미터가 하나라도 있으면 가격과 rating.count 범위로 필터링합니다.
    숫자가 아닌 값은 422로 거부됩니다.

    Example:
        GET /v1/products?minPrice=10&maxPrice=20
    """
    bounds = (min_price, max_price, min_stock, max_stock)
    if all(bound is None for bound in bounds):
        products = repository.load_all()
    else:
        logger.info("Filtering products based on query parameters")
        products = repository.filter(
            min_price=min_price,
            max_price=max_price,
            min_count=min_stock,
            max_count=max_stock,
        )

    logger.info("Fetched %d products", len(products))
    return products


@router.post(
    "/products", response_model=Product, status_code=status.HTTP_201_CREATED
)
def create_product(
    product_data: ProductCreateRequest,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    새 상품을 추가합니다. 같은 id의 상품이 있어도 거부하지 않습니다.

    Example:
        Request:
        ```json
        {
            "id": 99,
            "title": "Widget",
            "price": 15.5,
            "rating": {"rate": 4, "count": 3}
        }
        ```
    """
    product = Product.model_validate(product_data.model_dump())
    repository.add(product)

    logger.info("Product created with ID: %s", product.id)
    return product


@router.get("/products/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    특정 상품의 상세 정보를 조회합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    product = _get_or_404(product_id, repository)

    logger.info("Fetched product with ID: %s", product_id)
    return product


@router.put("/products/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    상품 정보를 수정합니다. 요청에 포함된 필드만 변경됩니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    existing = _get_or_404(product_id, repository)

    changes = product_data.model_dump(exclude_unset=True, exclude_none=True)
    rating = Rating(
        rate=changes.pop("rate", existing.rating.rate),
        count=changes.pop("count", existing.rating.count),
    )
    updated = Product.model_validate(
        {**existing.model_dump(), **changes, "rating": rating.model_dump()}
    )
    if not repository.update(updated):
        # 조회 이후 다른 요청이 삭제한 경우
        logger.warning("Product removed before update with ID: %s", product_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ProductNotFoundException(product_id).message,
        )

    logger.info("Product updated with ID: %s", product_id)
    return updated


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    상품을 삭제합니다. 같은 id를 가진 상품은 모두 삭제됩니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    _get_or_404(product_id, repository)

    removed = repository.delete(product_id)
    logger.info("Product deleted with ID: %s (%d record(s))", product_id, removed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
