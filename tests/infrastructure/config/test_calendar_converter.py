"""CalendarConverterFactory のテスト."""

import json

from datetime import date
from pathlib import Path

import pytest

from wareki.domain.exceptions import InvalidArgumentError
from wareki.infrastructure.config.settings import Settings
from wareki.infrastructure.config.calendar_converter import (
    CalendarConverterFactory,
    get_calendar_converter,
    reset_calendar_converter,
)


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    path = tmp_path / "eras.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Alpha", "start": "2000-01-01", "end": "2009-12-31"},
                {"name": "Beta", "start": "2010-01-01"},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestCalendarConverterFactory:
    def test_create_with_default_table(self) -> None:
        converter = CalendarConverterFactory.create(Settings(_env_file=None))

        assert [era.name for era in converter.get_eras()] == [
            "Meiji",
            "Taisho",
            "Showa",
            "Heisei",
            "Reiwa",
        ]

    def test_create_with_seed_file(self, seed_file: Path) -> None:
        settings = Settings(_env_file=None, era_seed_file=seed_file)

        converter = CalendarConverterFactory.create(settings)

        assert [era.name for era in converter.get_eras()] == ["Alpha", "Beta"]
        jd = converter.to_japanese_date(date(2012, 3, 4))
        assert (jd.era.name, jd.year) == ("Beta", 3)

    def test_create_reads_environment(
        self, seed_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WAREKI_ERA_SEED_FILE", str(seed_file))

        converter = CalendarConverterFactory.create()

        assert converter.get_current_era() is not None
        assert converter.get_current_era().name == "Beta"

    def test_create_with_broken_seed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('[{"name": "Alpha"}]', encoding="utf-8")

        with pytest.raises(InvalidArgumentError):
            CalendarConverterFactory.create(
                Settings(_env_file=None, era_seed_file=path)
            )


class TestSharedConverter:
    def test_returns_same_instance(self) -> None:
        assert get_calendar_converter() is get_calendar_converter()

    def test_reset_creates_new_instance(self) -> None:
        first = get_calendar_converter()

        reset_calendar_converter()

        assert get_calendar_converter() is not first
