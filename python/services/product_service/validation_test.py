import pytest

from common.models import Product

from product_service.errors import (
    InvalidDayError,
    InvalidExpirationError,
    InvalidMonthError,
    InvalidYearError,
)
from product_service.validation import (
    split_date,
    validate_date_components,
    validate_date_grammar,
    validate_expiration,
    validate_unique_code,
)


@pytest.mark.parametrize(
    "text",
    ["01/01/0000", "31/12/9999", "29/02/2024", "31/02/2024", "10/10/2010", "30/11/1999"],
)
def test_date_grammar_accepts(text):
    assert validate_date_grammar(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1/01/2020",
        "01/1/2020",
        "01/01/20",
        "01/01/20200",
        "00/01/2020",
        "32/01/2020",
        "01/00/2020",
        "01/13/2020",
        "01-01-2020",
        "01.01.2020",
        "2020/01/01",
        " 01/01/2020",
        "01/01/2020\n",
        "01/01/２０２０",
    ],
)
def test_date_grammar_rejects(text):
    assert not validate_date_grammar(text)


def test_split_date():
    assert split_date("07/08/2031") == (7, 8, 2031)


def test_components_accept_zero_lower_bound():
    validate_date_components(0, 0, 0)
    validate_date_components(31, 12, 2024)


@pytest.mark.parametrize(
    "day, month, year, error",
    [
        (32, 1, 2020, InvalidDayError),
        (-1, 1, 2020, InvalidDayError),
        (1, 13, 2020, InvalidMonthError),
        (1, -1, 2020, InvalidMonthError),
        (1, 1, -1, InvalidYearError),
    ],
)
def test_components_reject(day, month, year, error):
    with pytest.raises(error):
        validate_date_components(day, month, year)


def test_day_checked_before_month():
    with pytest.raises(InvalidDayError) as exc_info:
        validate_date_components(40, 40, -1)
    assert exc_info.value.message == "invalid day"


def test_expiration_grammar_failure_message():
    with pytest.raises(InvalidExpirationError) as exc_info:
        validate_expiration("2020-01-01")
    assert exc_info.value.message == "invalid expiration date"


def test_unique_code():
    products = [Product(id=1, code_value="A"), Product(id=2, code_value="B")]
    assert validate_unique_code("C", products)
    assert not validate_unique_code("B", products)
    assert not validate_unique_code("A", products)
    assert validate_unique_code("a", products)
    assert validate_unique_code("A", [])
