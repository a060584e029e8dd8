"""비즈니스 로직 서비스."""

from catalog_api.services.auth_service import AuthService
from catalog_api.services.credential_store import CredentialStore
from catalog_api.services.product_repository import ProductRepository
from catalog_api.services.catalog_seeder import seed_catalog

__all__ = ["AuthService", "CredentialStore", "ProductRepository", "seed_catalog"]
