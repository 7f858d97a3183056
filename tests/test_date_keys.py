# tests/test_date_keys.py
from golf_league.logic.date_keys import DateKey, format_date_key, key_sort_key, parse_date_key


def test_parse_accepts_both_marker_casings():
    assert parse_date_key("2021 Wk 3") == DateKey(2021, 3)
    assert parse_date_key("2021 WK 3") == DateKey(2021, 3)
    assert parse_date_key("2019 wk 12") == DateKey(2019, 12)


def test_parse_accepts_any_two_letter_marker():
    assert parse_date_key("2022 Zz 7") == DateKey(2022, 7)


def test_parse_rejects_other_keys():
    for key in ["Names", "_id", "2021 Week 3", "21 Wk 3", "2021 Wk", "2021  Wk 3", "2021 Wk 3 ", "", None, 2021]:
        assert parse_date_key(key) is None, key


def test_parse_is_ascii_and_whole_string():
    for key in ["2021 Wk 3\n", "\u0662\u0660\u0662\u0661 Wk 3", "2021 W\u00e9 3", "2021 Wk \u0663"]:
        assert parse_date_key(key) is None, key


def test_ordinal_and_ordering():
    assert DateKey(2021, 3).ordinal == 202103
    assert DateKey(2020, 40) < DateKey(2021, 1) < DateKey(2021, 2)


def test_mixed_key_sort_puts_names_last():
    keys = ["2021 Wk 10", "Names", "2020 WK 30", "2021 Wk 2", "_id"]
    assert sorted(keys, key=key_sort_key) == ["2020 WK 30", "2021 Wk 2", "2021 Wk 10", "Names", "_id"]


def test_format_uses_marker_of_the_season():
    assert format_date_key(2020, 3) == "2020 WK 3"
    assert format_date_key(2021, 3) == "2021 Wk 3"
    assert parse_date_key(format_date_key(2024, 18)) == DateKey(2024, 18)
