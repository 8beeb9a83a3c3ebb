from d7_engine.logic.csv_parser import parse_csv_line, parse_csv_text


def test_quoted_comma_stays_in_field():
    assert parse_csv_line('A,"B, and C",D') == ["A", "B, and C", "D"]


def test_fields_are_trimmed():
    assert parse_csv_line("  a ,b  ,  c") == ["a", "b", "c"]


def test_trailing_comma_yields_empty_last_field():
    assert parse_csv_line("a,b,") == ["a", "b", ""]


def test_doubled_quotes_are_toggles_not_escapes():
    # "" closes and reopens the quoted section; no literal quote is kept
    assert parse_csv_line('"say ""hi"", ok",x') == ["say hi, ok", "x"]


def test_unbalanced_quote_swallows_rest_of_line():
    assert parse_csv_line('a,"b,c,d') == ["a", "b,c,d"]


def test_blank_and_whitespace_lines_are_skipped():
    text = "h1,h2\r\n\r\n   \na,b\n\n"
    assert parse_csv_text(text) == [["h1", "h2"], ["a", "b"]]


def test_crlf_and_lf_both_split():
    assert parse_csv_text("a,b\r\nc,d\ne,f") == [["a", "b"], ["c", "d"], ["e", "f"]]


def test_quoted_newline_is_not_supported():
    # The line split happens before quote handling, so the second half
    # starts outside quotes and its stray quote opens a new section
    rows = parse_csv_text('a,"multi\nline",b')
    assert rows == [["a", "multi"], ["line,b"]]


def test_header_is_not_dropped_by_parser():
    rows = parse_csv_text("col1,col2\nv1,v2\n")
    assert rows[0] == ["col1", "col2"]


def test_empty_text():
    assert parse_csv_text("") == []
