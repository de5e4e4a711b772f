import pytest

from recipes.calculators import ProfitCalculator, compute, parse_decimal, parse_whole_number
from recipes.calculators.input_parser import InvalidNumber
from services.errors import ValidationError


def test_compute_reference_case():
    report = compute(100, 10, 15)
    assert report.total_expense == 100
    assert report.total_sales == 150
    assert report.profit == 50
    assert report.profit_percentage == 50.0


def test_compute_from_text():
    report = compute("100", "10", "15")
    assert report.total_sales == pytest.approx(150.0)
    assert report.profit_percentage == pytest.approx(50.0)


@pytest.mark.parametrize(
    "expense, quantity, price",
    [(1.0, 1.0, 1.0), (37.5, 12, 4.25), (0.1, 3, 0.2), (1000, 250, 3.99)],
)
def test_sales_and_profit_formula(expense, quantity, price):
    report = compute(expense, quantity, price)
    assert report.total_sales == pytest.approx(quantity * price)
    assert report.profit == pytest.approx(quantity * price - expense)


def test_negative_profit():
    report = compute(200, 10, 15)
    assert report.profit == pytest.approx(-50.0)
    assert report.profit_percentage == pytest.approx(-25.0)
    assert not report.is_profitable


def test_zero_expense_percentage_is_undefined():
    report = compute(0, 10, 15)
    assert report.total_sales == 150
    assert report.profit == 150
    assert report.profit_percentage is None


def test_calculate_is_deterministic():
    assert ProfitCalculator.calculate(80, 4, 30) == ProfitCalculator.calculate(80, 4, 30)


def test_empty_field_rejected():
    with pytest.raises(ValidationError) as exc:
        compute("", "10", "5")
    assert exc.value.fields == ["expense"]
    assert exc.value.user_message == "Preencha todos os campos obrigatórios."


def test_missing_fields_all_reported():
    with pytest.raises(ValidationError) as exc:
        compute(None, "  ", "5")
    assert exc.value.fields == ["expense", "quantity"]


def test_non_numeric_rejected():
    with pytest.raises(ValidationError) as exc:
        compute("100", "dez", "5")
    assert exc.value.fields == ["quantity"]
    assert "Quantidade produzida" in exc.value.user_message


@pytest.mark.parametrize("value", ["nan", "inf", "-5", True])
def test_unusable_numbers_rejected(value):
    with pytest.raises(ValidationError):
        compute(value, "10", "5")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12,50", 12.5),
        ("12.50", 12.5),
        ("1.234,56", 1234.56),
        ("1,234.56", 1234.56),
        ("1.234.567", 1234567.0),
        ("R$ 15,90", 15.9),
        (" 7 ", 7.0),
        (3, 3.0),
    ],
)
def test_parse_decimal_formats(text, expected):
    assert parse_decimal(text) == pytest.approx(expected)


def test_parse_decimal_blank_is_none():
    assert parse_decimal("") is None
    assert parse_decimal(None) is None


def test_parse_whole_number():
    assert parse_whole_number("10") == 10
    assert parse_whole_number("10,0") == 10
    with pytest.raises(InvalidNumber):
        parse_whole_number("2,5")


@pytest.mark.parametrize("text", ["1_000", "1e3", "12abc", "--5"])
def test_parse_decimal_rejects_non_digit_text(text):
    with pytest.raises(InvalidNumber):
        parse_decimal(text)


def test_lone_dot_is_decimal():
    assert parse_decimal("1.000") == pytest.approx(1.0)
    assert parse_decimal("1.000,00") == pytest.approx(1000.0)
    assert parse_decimal("1.000.000") == pytest.approx(1000000.0)


def test_profitable_flag():
    assert compute(100, 10, 15).is_profitable
    assert not compute(150, 10, 15).is_profitable
