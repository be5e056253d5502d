from pydantic_settings import BaseSettings
from typing import Optional


class AppSettings(BaseSettings):
    APP_NAME: str = "Haystack GitHub"

    LOG_LEVEL: str = "INFO"

    # ===== GitHub =====
    # Without a token the client runs unauthenticated and GitHub applies
    # its anonymous rate limit.
    GITHUB_PERSONAL_ACCESS_TOKEN: Optional[str] = None
    GITHUB_TIMEOUT: int = 15


settings = AppSettings()
