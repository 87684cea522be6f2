"""元号検索のユースケース."""

from wareki.application.dtos.conversion_dto import (
    CalculateYearInputDto,
    CalculateYearOutputDto,
    EraOutputItem,
    ListErasInputDto,
    ListErasOutputDto,
)
from wareki.application.services.japanese_date_formatter import label_for
from wareki.common.logging import get_logger
from wareki.domain.exceptions import InvalidArgumentError, WarekiError
from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.domain.value_objects.era import Era


logger = get_logger(__name__)


class LookupErasUseCase:
    """元号一覧・年変換のユースケース."""

    def __init__(self, converter: CalendarConverterService) -> None:
        self.converter = converter

    def list_eras(self, input_dto: ListErasInputDto) -> ListErasOutputDto:
        """元号一覧を取得する（期間指定時はその期間と重なる元号のみ）."""
        try:
            eras = self._find_eras(input_dto)
        except WarekiError as e:
            logger.warning("list_eras failed", error=e.message)
            return ListErasOutputDto(success=False, error_message=e.message)

        return ListErasOutputDto(eras=[_to_item(era) for era in eras])

    def calculate_year(self, input_dto: CalculateYearInputDto) -> CalculateYearOutputDto:
        """元号年と西暦年を相互に変換する."""
        try:
            if input_dto.direction == "gregorian":
                year = self.converter.calculate_gregorian_year(
                    input_dto.era_name, input_dto.year
                )
            elif input_dto.direction == "japanese":
                year = self.converter.calculate_japanese_year(
                    input_dto.year, input_dto.era_name
                )
            else:
                raise InvalidArgumentError(
                    f"不正な変換方向です: {input_dto.direction}", input_dto.direction
                )
        except WarekiError as e:
            logger.warning(
                "calculate_year failed", input=repr(input_dto), error=e.message
            )
            return CalculateYearOutputDto(success=False, error_message=e.message)

        return CalculateYearOutputDto(year=year)

    def _find_eras(self, input_dto: ListErasInputDto) -> list[Era]:
        if input_dto.range_start is None and input_dto.range_end is None:
            return self.converter.get_eras()

        if input_dto.range_start is None or input_dto.range_end is None:
            raise InvalidArgumentError("期間は開始日と終了日の両方を指定してください")

        return self.converter.get_overlapping_eras(
            input_dto.range_start, input_dto.range_end
        )


def _to_item(era: Era) -> EraOutputItem:
    label = label_for(era)
    return EraOutputItem.from_era(era, label.kanji, label.abbreviation)
