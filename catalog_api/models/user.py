"""
User 모델

메모리에 보관되는 사용자 계정 정보입니다.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    사용자 모델

    Attributes:
        id: 사용자 ID
        name: 표시 이름 (선택)
        email: 이메일 주소 (선택)
        username: 사용자명 (조회 키, 대소문자 구분)
        hashed_password: bcrypt로 해싱된 비밀번호
    """

    id: int
    name: str | None = None
    email: str | None = None
    username: str
    hashed_password: str = Field(repr=False)

    def __str__(self) -> str:
        """User 객체의 문자열 표현 (사용자 친화적)"""
        return f"User: {self.username}"
