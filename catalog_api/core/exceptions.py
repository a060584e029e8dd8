"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
"""


class UserAlreadyExistsException(Exception):
    """
    이미 등록된 사용자명 또는 이메일로 회원 가입을 시도할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, username: str):
        self.username = username
        self.message = f"User with username or email '{username}' already exists"
        super().__init__(self.message)


class InvalidCredentialsException(Exception):
    """
    로그인 실패 시 발생하는 예외 (존재하지 않는 사용자, 잘못된 비밀번호)

    사용자 존재 여부를 노출하지 않도록 항상 같은 메시지를 사용합니다.

    HTTP Status Code: 403 Forbidden
    """

    def __init__(self, message: str = "Invalid username or password"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenException(Exception):
    """
    토큰 검증 실패 시 발생하는 예외 (누락, 형식 오류, 서명 불일치, 만료)

    실패 원인과 관계없이 클라이언트에는 같은 메시지가 전달됩니다.

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, message: str = "Could not validate credentials"):
        self.message = message
        super().__init__(self.message)


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        self.message = f"Product with id {product_id} not found"
        super().__init__(self.message)


class ProductStoreException(Exception):
    """
    상품 파일을 읽거나 해석할 수 없을 때 발생하는 예외
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        self.message = f"Failed to load product store '{path}': {reason}"
        super().__init__(self.message)


class CatalogSeedException(Exception):
    """
    원격 카탈로그에서 상품 파일을 초기화하지 못했을 때 발생하는 예외
    """

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        self.message = f"Failed to seed product catalog from {url}: {reason}"
        super().__init__(self.message)
