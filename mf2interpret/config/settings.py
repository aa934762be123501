from pydantic_settings import BaseSettings
from pydantic import field_validator
from functools import lru_cache


class Settings(BaseSettings):
    """
    Interpretation settings loaded from environment variables.

    Environment variables can come from:
    - .env file
    - System environment

    Variable names use the MF2_ prefix:
    - MF2_MAX_DEPTH (nested post recursion bound)
    - MF2_HTTP_TIMEOUT, MF2_USER_AGENT, MF2_FOLLOW_REDIRECTS (for the fetcher)
    """

    # Interpretation
    max_depth: int = 16

    # Remote fetching (author pages, nested documents)
    http_timeout: float = 10.0
    user_agent: str = "mf2-interpret/0.1 (+https://microformats.org/wiki/microformats2)"
    follow_redirects: bool = True

    class Config:
        env_prefix = "MF2_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra env vars

    @field_validator('max_depth', mode='before')
    @classmethod
    def clamp_max_depth(cls, v):
        """A depth below 1 would refuse to interpret nested posts at all"""
        if v is None:
            return 16
        return max(int(v), 1)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
