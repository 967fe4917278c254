from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    cors_origin: str = Field("http://localhost:5173", alias="CORS_ORIGIN")
    cors_max_age: int = Field(3600, alias="CORS_MAX_AGE")

    # True: generation failures answer 200 with an error string in the curp field.
    curp_fold_errors: bool = Field(True, alias="CURP_FOLD_ERRORS")
    curp_strict_gender: bool = Field(False, alias="CURP_STRICT_GENDER")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True


settings = Settings()


def get_settings() -> Settings:
    return settings
