"""
인증 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
"""

from pydantic import BaseModel, Field, ConfigDict


class UserRegisterRequest(BaseModel):
    """
    회원 가입 요청 스키마

    username과 password만 필수이며, 비밀번호 정책은 존재 여부만 확인합니다.

    Example:
        {
            "id": 1,
            "name": "Alice",
            "email": "alice@example.com",
            "username": "alice",
            "password": "secret1"
        }
    """

    id: int | None = Field(None, description="사용자 ID (생략 시 자동 부여)")
    name: str | None = Field(None, description="표시 이름", examples=["Alice"])
    email: str | None = Field(
        None, description="이메일 주소", examples=["alice@example.com"]
    )
    username: str = Field(
        ..., min_length=1, description="사용자명", examples=["alice"]
    )
    password: str = Field(
        ..., min_length=1, description="비밀번호", examples=["secret1"]
    )


class UserLoginRequest(BaseModel):
    """
    로그인 요청 스키마

    Example:
        {
            "username": "alice",
            "password": "secret1"
        }
    """

    username: str = Field(..., description="사용자명", examples=["alice"])
    password: str = Field(..., description="비밀번호", examples=["secret1"])


class TokenResponse(BaseModel):
    """
    JWT 토큰 응답 스키마

    Example:
        {
            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "token_type": "bearer"
        }
    """

    access_token: str = Field(..., description="JWT 액세스 토큰")
    token_type: str = Field(default="bearer", description="토큰 타입")


class TokenData(BaseModel):
    """검증된 토큰에서 꺼낸 클레임"""

    username: str


class UserResponse(BaseModel):
    """
    사용자 정보 응답 스키마 (비밀번호 해시 제외)

    Example:
        {
            "id": 1,
            "name": "Alice",
            "email": "alice@example.com",
            "username": "alice"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="사용자 ID")
    name: str | None = Field(None, description="표시 이름")
    email: str | None = Field(None, description="이메일 주소")
    username: str = Field(..., description="사용자명")
