"""Application configuration using Pydantic settings."""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env file into os.environ
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database backing the key-value store
    database_url: str = "sqlite:///./catalog_manager.db"

    # Storage slots are named "{prefix}_products", "{prefix}_history", ...
    storage_key_prefix: str = "woocommerce"

    # Export file names: "{prefix}-products-YYYY-MM-DD.csv"
    export_file_prefix: str = "woocommerce"

    # Soft cap shown next to the SEO description field (not enforced)
    seo_description_limit: int = 160

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def storage_key(self, collection: str) -> str:
        """Get the storage key for a collection name."""
        return f"{self.storage_key_prefix}_{collection}"


settings = Settings()
