from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = Field("random-context-provider", alias="APP_NAME")
    APP_VERSION: str = Field("0.1.0", alias="APP_VERSION")

    # All provider routes are mounted below this prefix
    API_PREFIX: str = Field("/proxy/v1", alias="API_PREFIX")

    HOST: str = Field("0.0.0.0", alias="HOST")
    PORT: int = Field(3000, alias="PORT")
    RELOAD: bool = Field(False, alias="RELOAD")

    LOG_LEVEL: str = Field("INFO", alias="LOG_LEVEL")
    ENABLE_DETAILED_LOGGING: bool = Field(False, alias="ENABLE_DETAILED_LOGGING")
    ENABLE_ERROR_LOGGING: bool = Field(True, alias="ENABLE_ERROR_LOGGING")

    ALLOWED_CORS_ORIGINS: str = Field("*", alias="ALLOWED_CORS_ORIGINS")

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    @property
    def cors_origins_list(self) -> list[str]:
        if self.ALLOWED_CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_CORS_ORIGINS.split(",")]


settings = Settings()
