# pickbot/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Pick-bot")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # model engine: auto | openai | ollama | echo
    MODEL_ENGINE: str = Field(default="auto")
    USE_OLLAMA: bool = Field(default=False)
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4-turbo-preview")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")

    # generation
    TEMPERATURE: float = Field(default=0.8)
    MAX_TOKENS: int = Field(default=1000)
    MODEL_TIMEOUT_S: float = Field(default=60.0, gt=0)

    # personas + client side
    PERSONAS_PATH: str | None = None
    STATE_PATH: str = Field(default=os.path.join("~", ".pickbot", "state.json"))
    API_URL: str = Field(default="http://localhost:8000")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
