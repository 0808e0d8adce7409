import datetime as dt

import pytest

from trafficmon.textutil import (
    compare_clock_time,
    count_one_bits,
    get_number_bit,
    int_to_string,
    is_color_similar,
    json_value_simple,
    normalize_font_name,
    set_number_bit,
    similarity_degree,
    string_format,
    string_normalize,
    string_split,
    string_transform,
    transparent_color_convert,
    variant_to_string,
)


def test_string_normalize_strips_blanks_and_controls():
    assert string_normalize(" \t\r\n abc def \x01\n") == "abc def"


def test_string_normalize_all_blank_becomes_empty():
    assert string_normalize("  \t \n") == ""


def test_string_normalize_keeps_clean_text():
    assert string_normalize("abc") == "abc"


def test_string_split_skips_empty_and_trims():
    assert string_split(" a , b ,,c ", ",") == ["a", "b", "c"]


def test_string_split_keeps_empty_when_asked():
    parts = string_split("a,,b", ",", skip_empty=False)
    assert len(parts) == 3
    assert parts[1] == ""


def test_string_split_without_trim():
    assert string_split("a, b", ",", trim=False) == ["a", " b"]


def test_string_split_multichar_separator():
    assert string_split("x::y::z", "::") == ["x", "y", "z"]


def test_string_split_empty_separator_raises():
    with pytest.raises(ValueError):
        string_split("abc", "")


def test_string_transform_ascii_only():
    text = "abc\u00e4XYZ"
    upper = string_transform(text, True)
    assert upper[:3] == "ABC"
    assert upper[3] == "\u00e4"
    assert string_transform(upper, False)[:6] == "abc\u00e4xy"


def test_string_transform_round_trip():
    text = "hello world 123"
    assert string_transform(string_transform(text, True), False) == text


def test_similarity_identical_is_one():
    assert similarity_degree("Realtek PCIe", "Realtek PCIe") == 1.0


def test_similarity_empty_is_zero():
    assert similarity_degree("", "abc") == 0.0
    assert similarity_degree("abc", "") == 0.0


def test_similarity_bounds_and_symmetry():
    a, b = "Intel Ethernet", "Intel(R) Ethernet Connection"
    value = similarity_degree(a, b)
    assert 0.0 < value < 1.0
    assert value == similarity_degree(b, a)


def test_similarity_prefers_closer_string():
    target = "Wireless Adapter"
    assert similarity_degree(target, "Wireless Adaptor") > similarity_degree(
        target, "Bluetooth Device"
    )


def test_int_to_string_plain():
    assert int_to_string(1234567) == str(1234567)


def test_int_to_string_thousands():
    assert int_to_string(1234567, True) == "1,234,567"


def test_int_to_string_thousands_round_trip():
    text = int_to_string(98765432101, True)
    assert text.replace(",", "") == str(98765432101)
    assert all(len(group) == 3 for group in text.split(",")[1:])


def test_int_to_string_small_has_no_separator():
    assert int_to_string(999, True) == str(999)


def test_int_to_string_unsigned():
    assert int_to_string(-1, is_unsigned=True) == "18446744073709551615"


def test_variant_to_string_values():
    assert variant_to_string(7) == str(7)
    assert variant_to_string(0.5) == str(0.5)
    assert variant_to_string("text") == "text"


def test_string_format_replaces_placeholders():
    assert string_format("<%1%>|<%2%>", "abc", 42) == "abc|" + str(42)


def test_string_format_repeated_and_unused():
    assert string_format("<%1%><%1%><%3%>", "x") == "xx<%3%>"


def test_json_value_simple_strings():
    text = '{"ip": "203.0.113.5", "location": "Somewhere Far"}'
    assert json_value_simple(text, "ip") == "203.0.113.5"
    assert json_value_simple(text, "location") == "Somewhere Far"


def test_json_value_simple_number_and_missing():
    text = '{"count": 42}'
    assert json_value_simple(text, "count") == "42"
    assert json_value_simple(text, "ip") == ""


def test_normalize_font_name_semilight():
    name, weight = normalize_font_name("Microsoft YaHei Semilight")
    assert weight == 350
    assert name + " Semilight" == "Microsoft YaHei Semilight"


def test_normalize_font_name_unknown_style():
    assert normalize_font_name("Segoe UI") == ("Segoe UI", None)


def test_normalize_font_name_single_word():
    assert normalize_font_name("Arial") == ("Arial", None)


def test_normalize_font_name_truncates():
    long_name = "A" * 40 + " Bold"
    name, weight = normalize_font_name(long_name)
    assert weight is not None
    assert name == ("A" * 40)[:31]


def test_count_one_bits():
    assert count_one_bits(0) == 0
    assert count_one_bits(0xFFFFFFFF) == 32


def test_set_and_get_bit_round_trip():
    for bit in range(32):
        num = set_number_bit(0, bit, True)
        assert get_number_bit(num, bit)
        assert count_one_bits(num) == 1
        assert set_number_bit(num, bit, False) == 0


def test_set_bit_preserves_others():
    num = set_number_bit(0xFFFFFFFF, 5, False)
    assert not get_number_bit(num, 5)
    assert count_one_bits(num) == 31


def test_is_color_similar():
    assert is_color_similar(0x123456, 0x123456)
    assert is_color_similar(0x000000, 0x171717)
    assert not is_color_similar(0x000000, 0x000018)
    assert not is_color_similar(0x000000, 0x180000)


def test_transparent_color_black_unchanged():
    assert transparent_color_convert(0) == 0


def test_transparent_color_unequal_channels_unchanged():
    assert transparent_color_convert(0x102030) == 0x102030


def test_transparent_color_equal_channels_changed():
    for color in (0x404040, 0xFF00FF):
        result = transparent_color_convert(color)
        r, g, b = result & 0xFF, (result >> 8) & 0xFF, (result >> 16) & 0xFF
        assert r == color & 0xFF
        assert g == (color >> 8) & 0xFF
        assert r != b
        assert abs(b - ((color >> 16) & 0xFF)) == 1
        assert b <= 255


def test_compare_clock_time_adds_back():
    a, b = dt.time(10, 0, 5), dt.time(9, 30, 15)
    diff = compare_clock_time(a, b)
    base = dt.datetime.combine(dt.date(2020, 1, 1), b)
    delta = dt.timedelta(hours=diff.hour, minutes=diff.minute, seconds=diff.second)
    assert (base + delta).time() == a


def test_compare_clock_time_wraps_midnight():
    a, b = dt.time(1, 0, 0), dt.time(23, 0, 0)
    diff = compare_clock_time(a, b)
    base = dt.datetime.combine(dt.date(2020, 1, 1), b)
    delta = dt.timedelta(hours=diff.hour, minutes=diff.minute, seconds=diff.second)
    assert (base + delta).time() == a


def test_compare_clock_time_same_is_zero():
    assert compare_clock_time(dt.time(8, 8, 8), dt.time(8, 8, 8)) == dt.time(0, 0, 0)