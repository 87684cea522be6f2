"""InMemoryEraRepository のテスト."""

from datetime import date, timedelta

import pytest

from wareki.domain.exceptions import InvalidArgumentError
from wareki.domain.value_objects.era import Era
from wareki.infrastructure.persistence.in_memory_era_repository import (
    InMemoryEraRepository,
)


def _names(infos) -> list[str]:
    return [info.era.name for info in infos]


class TestSeedTable:
    """既定の5元号テーブルのテスト."""

    def test_five_eras_in_chronological_order(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        eras = era_repository.get_all()

        assert _names(eras) == ["Meiji", "Taisho", "Showa", "Heisei", "Reiwa"]
        assert [info.id for info in eras] == [1, 2, 3, 4, 5]
        assert [info.order for info in eras] == [1, 2, 3, 4, 5]

    def test_eras_tile_the_timeline(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        eras = [info.era for info in era_repository.get_all()]
        for previous, following in zip(eras, eras[1:], strict=False):
            assert previous.end is not None
            assert following.start == previous.end + timedelta(days=1)

    def test_only_last_era_is_current(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        eras = era_repository.get_all()
        assert [info.era.is_current for info in eras] == [
            False,
            False,
            False,
            False,
            True,
        ]

    def test_get_all_returns_copy(self, era_repository: InMemoryEraRepository) -> None:
        eras = era_repository.get_all()
        eras.clear()
        assert len(era_repository.get_all()) == 5


class TestLookups:
    """検索のテスト."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (date(1868, 1, 25), "Meiji"),
            (date(1912, 7, 29), "Meiji"),
            (date(1912, 7, 30), "Taisho"),
            (date(1926, 12, 24), "Taisho"),
            (date(1926, 12, 25), "Showa"),
            (date(1989, 1, 7), "Showa"),
            (date(1989, 1, 8), "Heisei"),
            (date(2019, 4, 30), "Heisei"),
            (date(2019, 5, 1), "Reiwa"),
            (date(2100, 1, 1), "Reiwa"),
        ],
    )
    def test_get_by_date(
        self, era_repository: InMemoryEraRepository, target: date, expected: str
    ) -> None:
        info = era_repository.get_by_date(target)
        assert info is not None
        assert info.era.name == expected

    def test_get_by_date_before_first_era(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        assert era_repository.get_by_date(date(1868, 1, 24)) is None
        assert era_repository.get_by_date(date(1850, 1, 1)) is None

    def test_every_day_has_exactly_one_era(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        eras = era_repository.get_all()
        day = date(1868, 1, 25)
        while day <= date(2030, 12, 31):
            matches = [info for info in eras if info.contains(day)]
            assert len(matches) == 1
            assert era_repository.get_by_date(day) == matches[0]
            day += timedelta(days=97)

    def test_get_by_name(self, era_repository: InMemoryEraRepository) -> None:
        info = era_repository.get_by_name("Heisei")
        assert info is not None
        assert info.era.start == date(1989, 1, 8)

    def test_get_by_name_is_case_sensitive(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        assert era_repository.get_by_name("heisei") is None
        assert era_repository.get_by_name("UnknownEra") is None

    def test_get_by_empty_name_raises(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            era_repository.get_by_name("")

    def test_get_by_id(self, era_repository: InMemoryEraRepository) -> None:
        info = era_repository.get_by_id(3)
        assert info is not None
        assert info.era.name == "Showa"
        assert era_repository.get_by_id(99) is None

    def test_get_current(self, era_repository: InMemoryEraRepository) -> None:
        current = era_repository.get_current()
        assert current is not None
        assert current.era.name == "Reiwa"


class TestOverlapping:
    """get_overlapping のテスト."""

    def test_range_spanning_two_eras(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        result = era_repository.get_overlapping(date(1985, 1, 1), date(1995, 1, 1))
        assert _names(result) == ["Showa", "Heisei"]

    def test_single_day_on_boundary(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        assert _names(
            era_repository.get_overlapping(date(2019, 5, 1), date(2019, 5, 1))
        ) == ["Reiwa"]
        assert _names(
            era_repository.get_overlapping(date(2019, 4, 30), date(2019, 5, 1))
        ) == ["Heisei", "Reiwa"]

    def test_range_into_far_future_includes_current(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        result = era_repository.get_overlapping(date(2030, 1, 1), date(2999, 1, 1))
        assert _names(result) == ["Reiwa"]

    def test_range_before_first_era_is_empty(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        assert era_repository.get_overlapping(date(1800, 1, 1), date(1850, 1, 1)) == []

    def test_whole_span(self, era_repository: InMemoryEraRepository) -> None:
        result = era_repository.get_overlapping(date(1800, 1, 1), date(2100, 1, 1))
        assert len(result) == 5

    def test_reversed_range_raises(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="開始日"):
            era_repository.get_overlapping(date(1995, 1, 1), date(1985, 1, 1))


class TestTableInvariants:
    """構築時の不変条件検証のテスト."""

    def test_empty_table_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="1つ以上"):
            InMemoryEraRepository([])

    def test_no_current_era_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="ちょうど1つ"):
            InMemoryEraRepository(
                [Era("A", date(2000, 1, 1), date(2000, 12, 31))]
            )

    def test_two_current_eras_raise(self) -> None:
        with pytest.raises(InvalidArgumentError, match="ちょうど1つ"):
            InMemoryEraRepository(
                [Era("A", date(2000, 1, 1)), Era("B", date(2001, 1, 1))]
            )

    def test_current_era_not_last_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="最後に定義"):
            InMemoryEraRepository(
                [Era("A", date(2000, 1, 1)), Era("B", date(1990, 1, 1), date(1999, 12, 31))]
            )

    def test_current_era_in_the_middle_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="最後に定義する必要があります: B"):
            InMemoryEraRepository(
                [
                    Era("A", date(1990, 1, 1), date(1999, 12, 31)),
                    Era("B", date(2000, 1, 1)),
                    Era("C", date(2010, 1, 1), date(2019, 12, 31)),
                ]
            )

    def test_gap_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="翌日"):
            InMemoryEraRepository(
                [
                    Era("A", date(2000, 1, 1), date(2000, 12, 31)),
                    Era("B", date(2001, 1, 2)),
                ]
            )

    def test_overlap_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="翌日"):
            InMemoryEraRepository(
                [
                    Era("A", date(2000, 1, 1), date(2000, 12, 31)),
                    Era("B", date(2000, 12, 31)),
                ]
            )

    def test_duplicate_name_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="重複"):
            InMemoryEraRepository(
                [
                    Era("A", date(2000, 1, 1), date(2000, 12, 31)),
                    Era("A", date(2001, 1, 1)),
                ]
            )

    def test_synthetic_table(self) -> None:
        repo = InMemoryEraRepository(
            [
                Era("Old", date(2000, 1, 1), date(2009, 12, 31)),
                Era("New", date(2010, 1, 1)),
            ]
        )

        info = repo.get_by_date(date(2009, 12, 31))
        assert info is not None
        assert info.era.name == "Old"


class TestSucceededBy:
    """新元号の追加のテスト."""

    def test_appends_new_current_era(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        extended = era_repository.succeeded_by("Next", date(2040, 4, 1))

        reiwa = extended.get_by_name("Reiwa")
        assert reiwa is not None
        assert reiwa.era.end == date(2040, 3, 31)

        current = extended.get_current()
        assert current is not None
        assert current.era.name == "Next"
        assert current.order == 6

    def test_existing_lookups_are_unchanged(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        extended = era_repository.succeeded_by("Next", date(2040, 4, 1))

        for day in (date(1900, 1, 1), date(1989, 1, 8), date(2019, 5, 1)):
            before = era_repository.get_by_date(day)
            after = extended.get_by_date(day)
            assert before is not None and after is not None
            assert before.era.name == after.era.name

    def test_original_table_is_not_modified(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        era_repository.succeeded_by("Next", date(2040, 4, 1))

        current = era_repository.get_current()
        assert current is not None
        assert current.era.name == "Reiwa"
        assert len(era_repository.get_all()) == 5

    def test_dates_from_both_tables_order_consistently(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        extended = era_repository.succeeded_by("Next", date(2040, 4, 1))
        day = date(2023, 12, 25)
        before = era_repository.get_by_date(day)
        after = extended.get_by_date(day)
        assert before is not None and after is not None

        a = before.to_japanese_date(day)
        b = after.to_japanese_date(day)

        assert a != b
        assert (a > b) != (b > a)
        assert sorted([a, b]) == sorted([b, a])

    def test_start_not_after_current_start_raises(
        self, era_repository: InMemoryEraRepository
    ) -> None:
        with pytest.raises(InvalidArgumentError, match="より後"):
            era_repository.succeeded_by("Next", date(2019, 5, 1))
