from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='RICH_ENUM_',
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'rich-enum'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Logs Logger.io args/return when enabled

    # Service context shown on every log line
    SERVICE_NAME: str = 'rich-enum'
    DEPLOY_ENV: str = 'local_dev'

    # Logging sinks, added only by configure_logging()
    LOG_LEVEL: str = 'INFO'
    LOG_TO_FILE: bool = False
    LOG_DIR: Path = Path('logs')
    LOG_ENQUEUE: bool = False
    INTERCEPT_STDLIB_LOGGING: bool = False

    # Warn when a stored value has no declared member during reconciliation
    WARN_ON_UNKNOWN_VALUE: bool = True

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def MIN_LOG_LEVEL(self) -> str:
        return 'DEBUG' if self.DEBUG else self.LOG_LEVEL


settings = Settings()  # type: ignore
