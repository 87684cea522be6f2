"""アプリケーション設定.

環境変数（接頭辞 ``WAREKI_``）と任意の ``.env`` ファイルから読み込む。
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_FILE_PATH = ".env"


def find_env_file() -> str | None:
    """カレントディレクトリから親方向に.envファイルを探す."""
    current = Path.cwd()
    for directory in (current, *current.parents):
        candidate = directory / ENV_FILE_PATH
        if candidate.is_file():
            return str(candidate)
    return None


class Settings(BaseSettings):
    """wareki settings."""

    model_config = SettingsConfigDict(
        env_prefix="WAREKI_",
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_json: bool = False
    era_seed_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"不正なログレベルです: {value}")
        return value


@lru_cache
def get_settings() -> Settings:
    """設定を取得する（初回のみ読み込み）."""
    return Settings()


def reload_settings() -> Settings:
    """設定を読み込み直す."""
    get_settings.cache_clear()
    return get_settings()
