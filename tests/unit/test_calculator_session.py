"""
Тесты для CalculatorSession

Проверяет:
1. Пересчёт на каждое изменение ввода и актива
2. Сброс результата при недопустимом вводе (без устаревших значений)
3. Явный расчёт (кнопка)
4. Строки отображения
"""

import pytest

from src.calculator.config import CalculatorConfig
from src.calculator.session import CalculatorSession
from src.core.domain import AssetKind
from src.core.math import convert


@pytest.fixture
def session() -> CalculatorSession:
    return CalculatorSession()


class TestInitialState:
    """Начальное состояние"""

    def test_defaults(self, session: CalculatorSession) -> None:
        assert session.asset is AssetKind.BTC
        assert session.input_text == ""
        assert session.result is None
        assert session.rows() == []

    def test_configured_default_asset(self) -> None:
        session = CalculatorSession(CalculatorConfig(default_asset=AssetKind.GOLD))
        assert session.asset is AssetKind.GOLD


class TestSetInput:
    """Пересчёт при изменении текста"""

    def test_valid_input_computes(self, session: CalculatorSession) -> None:
        result = session.set_input("50000")
        assert result == convert(AssetKind.BTC, 50_000.0)
        assert session.result is result

    def test_each_keystroke_recomputes(self, session: CalculatorSession) -> None:
        for text in ["5", "50", "500", "5000"]:
            session.set_input(text)
            assert session.result.btc_price == float(text)

    @pytest.mark.parametrize("text", ["", "abc", "-1", "nan"])
    def test_invalid_input_clears_result(self, session: CalculatorSession, text: str) -> None:
        session.set_input("50000")
        assert session.set_input(text) is None
        assert session.result is None
        assert session.input_text == text

    def test_recompute_logged(self, session: CalculatorSession, caplog) -> None:
        with caplog.at_level("DEBUG", logger="src.calculator.session"):
            session.set_input("0")
        assert "Recomputed btc=0.0" in caplog.text


class TestSetAsset:
    """Пересчёт при смене актива"""

    def test_asset_change_recomputes(self, session: CalculatorSession) -> None:
        session.set_input("1784.21")
        result = session.set_asset(AssetKind.GOLD)
        assert result == convert(AssetKind.GOLD, 1784.21)
        assert session.result.btc_price == 0.0

    def test_asset_change_without_input(self, session: CalculatorSession) -> None:
        assert session.set_asset("silver") is None
        assert session.asset is AssetKind.SILVER


class TestCalculate:
    """Явный расчёт"""

    def test_valid(self, session: CalculatorSession) -> None:
        session.set_input("23.14")
        session.set_asset(AssetKind.SILVER)
        assert session.calculate() == convert(AssetKind.SILVER, 23.14)

    def test_invalid_returns_none(self, session: CalculatorSession) -> None:
        session.set_input("abc")
        assert session.calculate() is None
        assert session.result is None

    def test_clear(self, session: CalculatorSession) -> None:
        session.set_input("100")
        session.clear()
        assert session.input_text == ""
        assert session.result is None
        assert session.calculate() is None


class TestRows:
    """Строки отображения"""

    def test_rows_mark_input(self, session: CalculatorSession) -> None:
        session.set_input("0")
        rows = session.rows()
        assert len(rows) == 3
        assert [r.label for r in rows] == ["Bitcoin", "Gold", "Silver"]
        assert rows[0].is_input
        assert rows[1].formatted == "$1,784.21"
