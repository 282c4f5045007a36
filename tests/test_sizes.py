import pytest

from dummygen.sizes import FormatError, human, parse_size_to_bytes


def test_parse_megabytes():
    assert parse_size_to_bytes("10MB") == 10_485_760


def test_parse_kilobytes():
    assert parse_size_to_bytes("512KB") == 524_288


def test_parse_bare_number_is_bytes():
    assert parse_size_to_bytes("100") == 100


def test_parse_fractional_gigabytes():
    assert parse_size_to_bytes("2.5GB") == round(2.5 * 1024 ** 3)


def test_parse_is_case_insensitive_and_trims():
    assert parse_size_to_bytes("  1kb ") == 1024
    assert parse_size_to_bytes("3 mb") == 3 * 1024 ** 2
    assert parse_size_to_bytes("7b") == 7


def test_parse_thousands_separators():
    assert parse_size_to_bytes("1,024") == 1024
    assert parse_size_to_bytes("1,000,000") == 1_000_000


def test_parse_rounds_half_up():
    assert parse_size_to_bytes("0.5") == 1
    assert parse_size_to_bytes("1.4") == 1


def test_parse_zero():
    assert parse_size_to_bytes("0") == 0


@pytest.mark.parametrize("text", ["abc", "", "MB", "10TB", "1.2.3", "-5"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(FormatError):
        parse_size_to_bytes(text)


def test_format_error_is_value_error():
    assert issubclass(FormatError, ValueError)


def test_human():
    assert human(100) == "100 B"
    assert human(2048) == "2.00 KB"
    assert human(10 * 1024 ** 2) == "10.00 MB"


def test_parse_rejects_overflowing_number():
    with pytest.raises(FormatError):
        parse_size_to_bytes("9" * 400)
    with pytest.raises(FormatError):
        parse_size_to_bytes("1" + "0" * 300 + "GB")


def test_human_large_and_zero():
    assert human(0) == "0 B"
    assert human(1023) == "1023 B"
    assert human(3 * 1024 ** 3 // 2) == "1.50 GB"
