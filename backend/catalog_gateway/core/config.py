from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central settings object.
    Built once at startup and handed to the app; locally you can use backend/.env.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Shopify Admin API
    SHOPIFY_SHOP: str = ""
    SHOPIFY_ADMIN_TOKEN: str = ""
    SHOPIFY_API_VERSION: str = "2025-07"

    # Shared secret callers send as X-API-Key
    MW_API_KEY: str = ""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    @property
    def graphql_url(self) -> str:
        return f"https://{self.SHOPIFY_SHOP}/admin/api/{self.SHOPIFY_API_VERSION}/graphql.json"
