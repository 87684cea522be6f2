"""日付変換のユースケース."""

from wareki.application.dtos.conversion_dto import (
    ConversionOutputDto,
    ParseJapaneseDateInputDto,
    ToGregorianInputDto,
    ToJapaneseInputDto,
)
from wareki.application.services.japanese_date_formatter import (
    JapaneseDateFormatter,
)
from wareki.common.logging import get_logger
from wareki.domain.exceptions import NotFoundError, WarekiError
from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.domain.value_objects.japanese_date import JapaneseDate


logger = get_logger(__name__)


class ConvertDateUseCase:
    """西暦・和暦変換のユースケース.

    ドメイン例外は捕捉して出力DTOのerror_messageに設定する。
    """

    def __init__(
        self,
        converter: CalendarConverterService,
        formatter: JapaneseDateFormatter | None = None,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            converter: 変換サービス
            formatter: 文字列変換サービス（省略時はconverterから生成）
        """
        self.converter = converter
        self.formatter = formatter or JapaneseDateFormatter(converter)

    def to_japanese(self, input_dto: ToJapaneseInputDto) -> ConversionOutputDto:
        """西暦日付を和暦日付に変換する."""
        try:
            japanese_date = self.converter.to_japanese_date(input_dto.gregorian_date)
        except WarekiError as e:
            logger.warning(
                "to_japanese failed",
                gregorian_date=str(input_dto.gregorian_date),
                error=e.message,
            )
            return ConversionOutputDto(success=False, error_message=e.message)
        return self._build_output(japanese_date)

    def to_gregorian(self, input_dto: ToGregorianInputDto) -> ConversionOutputDto:
        """和暦の元号名・年・月・日を西暦日付に変換する."""
        try:
            era = self.converter.find_era_by_name(input_dto.era_name)
            if era is None:
                raise NotFoundError(
                    f"元号「{input_dto.era_name}」が見つかりません", input_dto.era_name
                )
            japanese_date = JapaneseDate(
                era, input_dto.year, input_dto.month, input_dto.day
            )
            self.converter.to_gregorian_date(japanese_date)
        except WarekiError as e:
            logger.warning("to_gregorian failed", input=repr(input_dto), error=e.message)
            return ConversionOutputDto(success=False, error_message=e.message)
        return self._build_output(japanese_date)

    def parse(self, input_dto: ParseJapaneseDateInputDto) -> ConversionOutputDto:
        """和暦文字列を解析して西暦日付に変換する."""
        try:
            japanese_date = self.formatter.parse(input_dto.text)
            self.converter.to_gregorian_date(japanese_date)
        except WarekiError as e:
            logger.warning("parse failed", text=input_dto.text, error=e.message)
            return ConversionOutputDto(success=False, error_message=e.message)
        return self._build_output(japanese_date)

    def today(self) -> ConversionOutputDto:
        """今日の和暦日付を返す."""
        try:
            japanese_date = self.converter.today()
        except WarekiError as e:
            logger.warning("today failed", error=e.message)
            return ConversionOutputDto(success=False, error_message=e.message)
        return self._build_output(japanese_date)

    def _build_output(self, japanese_date: JapaneseDate) -> ConversionOutputDto:
        return ConversionOutputDto(
            japanese_date=japanese_date,
            gregorian_date=japanese_date.to_gregorian(),
            full_text=self.formatter.format_full(japanese_date),
            short_text=self.formatter.format_short(japanese_date),
            day_of_week=self.formatter.day_of_week(japanese_date),
        )
