"""
Configuration module for wareki.

設定・元号シードデータ・共有の変換サービスの一元化モジュール。
"""

from wareki.infrastructure.config.calendar_converter import (
    CalendarConverterFactory,
    get_calendar_converter,
    reset_calendar_converter,
)
from wareki.infrastructure.config.era_seed import (
    DEFAULT_ERA_SEED,
    EraSeedRecord,
    default_eras,
    load_era_seed,
)
from wareki.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
    # Era seed
    "DEFAULT_ERA_SEED",
    "EraSeedRecord",
    "default_eras",
    "load_era_seed",
    # Shared converter
    "CalendarConverterFactory",
    "get_calendar_converter",
    "reset_calendar_converter",
]
