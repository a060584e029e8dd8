"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # JWT 설정
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60

    # 비밀번호 해싱 설정 (bcrypt cost factor)
    bcrypt_rounds: int = 10

    # 회원 가입 시 중복 username/email 거부 여부 (False면 중복 허용)
    enforce_unique_usernames: bool = True

    # 상품 카탈로그 파일 설정
    products_file: str = "products.json"
    products_seed_url: str = ""  # 비어 있으면 시드 비활성화
    seed_timeout_seconds: int = 10

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"
    cors_origins: str = "*"  # 쉼표로 구분된 origin 목록

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def products_path(self) -> Path:
        """상품 JSON 파일 경로"""
        return Path(self.products_file)

    @property
    def cors_origin_list(self) -> list[str]:
        """
        CORS 허용 origin 목록 파싱

        Returns:
            ["*"] 또는 ["http://localhost:3000", "https://example.com", ...]
        """
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()
