from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Uploads
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_EXTENSIONS: list[str] = [".ofx", ".qfx"]

    # OFX 1.x SGML files declare CHARSET:1252
    FILE_ENCODING: str = "cp1252"

    @property
    def EFFECTIVE_LOG_LEVEL(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
