from arbcase.ingest.csv_text import (
    parse_fields,
    parse_flag,
    parse_float,
    parse_int,
    parse_line,
    split_table,
)


def test_parse_line_keeps_commas_inside_quotes():
    headers = ["Player", "Salary", "Club"]
    row = parse_line('"Kirby, George","$4,200,000",SEA', headers)
    assert row == {"Player": "Kirby, George", "Salary": "$4,200,000", "Club": "SEA"}


def test_parse_line_pads_missing_and_drops_extra_values():
    headers = ["a", "b", "c"]
    assert parse_line("1", headers) == {"a": "1", "b": "", "c": ""}
    assert parse_line("1,2,3,4,5", headers) == {"a": "1", "b": "2", "c": "3"}


def test_parse_fields_trims_and_flushes_last_field():
    assert parse_fields(" a , b ,c\r") == ["a", "b", "c"]
    assert parse_fields("a,") == ["a", ""]


def test_doubled_quotes_are_not_escapes():
    # Each quote only toggles state, so the embedded quotes vanish.
    assert parse_fields('"say ""hi""",x') == ["say hi", "x"]


def test_split_table_discards_blank_lines_and_parses_quoted_headers():
    headers, lines = split_table('"Name","Season"\n\nJoe Ryan,2025\n   \n')
    assert headers == ["Name", "Season"]
    assert lines == ["Joe Ryan,2025"]


def test_split_table_empty_text():
    assert split_table("") == ([], [])
    assert split_table("\n\n") == ([], [])


def test_numeric_coercion_defaults_to_zero():
    assert parse_float("") == 0.0
    assert parse_float("abc") == 0.0
    assert parse_float("nan") == 0.0
    assert parse_float(None) == 0.0
    assert parse_float("3.25") == 3.25
    assert parse_int("2025") == 2025
    assert parse_int("2025.0") == 2025
    assert parse_int("") == 0


def test_parse_flag_variants():
    assert parse_flag("TRUE") is True
    assert parse_flag("1") is True
    assert parse_flag("FALSE") is False
    assert parse_flag("") is None
    assert parse_flag("maybe") is None
