"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Intake settings loaded from environment variables."""

    INPUT_FILE: str = "arrivingAnimals.txt"
    OUTPUT_FILE: str = "newAnimals.txt"
    ENCODING: str = "utf-8"
    DEBUG: bool = False

    model_config = {
        "env_prefix": "ZOO_INTAKE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
