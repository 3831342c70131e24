from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Rutas de claves PEM
    private_key_path: str = Field("keys/token_private.pem", alias="TOKEN_PRIVATE_KEY_PATH")
    public_key_path: str = Field("keys/token_public.pem", alias="TOKEN_PUBLIC_KEY_PATH")

    # Margen (segundos) al validar nbf/exp
    leeway: int = Field(0, alias="TOKEN_LEEWAY")

    # Logging
    log_level: str = Field("info", alias="LOG_LEVEL")
    service_name: str = Field("claims-token", alias="SERVICE_NAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,  # permite defaults si no hay variable de entorno
    )


settings = Settings()
