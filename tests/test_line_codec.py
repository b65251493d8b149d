from fmark.line_codec import (
    ADD_BOOKMARK,
    TITLE_MAX_LENGTH,
    URL_MAX_LENGTH,
    add_bookmark_line,
    decode_line,
    encode_line,
    is_separator,
    separator_line,
)
from fmark.model import Bookmark


def test_encode_pads_columns_to_given_widths():
    b = Bookmark("Rust Programming", "Programming", "https://www.rust-lang.org/")
    line = encode_line(b, 25, 25)
    assert line == (
        "{T}{Rust Programming}" + " " * 10 + "{C}{Programming}" + " " * 15 + "{U}{https://www.rust-lang.org/}\n"
    )


def test_encode_uses_single_space_when_field_is_widest():
    b = Bookmark("Rust", "Lang", "https://rust-lang.org")
    assert encode_line(b, 0, 0) == "{T}{Rust} {C}{Lang} {U}{https://rust-lang.org}\n"
    assert encode_line(b, 4, 4) == "{T}{Rust} {C}{Lang} {U}{https://rust-lang.org}\n"


def test_encode_clamps_width_and_truncates_long_fields():
    b = Bookmark("x" * 40, "Lang", "https://e.example/" + "a" * 3000)
    line = encode_line(b, 40, 4)
    assert line.startswith("{T}{" + "x" * TITLE_MAX_LENGTH + "} {C}{Lang}")
    decoded = decode_line(line)
    assert decoded is not None
    assert decoded.title == "x" * TITLE_MAX_LENGTH
    assert len(decoded.url) == URL_MAX_LENGTH

    short = Bookmark("abc", "Lang", "u")
    assert encode_line(short, 34, 4).startswith("{T}{abc}" + " " * (TITLE_MAX_LENGTH - 3 + 1) + "{C}")


def test_truncation_counts_characters_not_bytes():
    b = Bookmark("é" * 40, "Käse", "https://e.example/")
    decoded = decode_line(encode_line(b, 40, 4))
    assert decoded.title == "é" * TITLE_MAX_LENGTH
    assert decoded.category == "Käse"


def test_decode_roundtrip_with_set_widths():
    records = [
        Bookmark("Rust", "Lang", "https://rust-lang.org"),
        Bookmark("Project's Github", "Development", "https://github.com/vannrr/fmark"),
        Bookmark("Ünïcode tïtle", "Ça va", "https://example.com/?q=1&r=2"),
    ]
    wt = max(len(r.title) for r in records)
    wc = max(len(r.category) for r in records)
    for r in records:
        assert decode_line(encode_line(r, wt, wc)) == r


def test_decode_strips_field_whitespace():
    assert decode_line("  {T}{ a }   {C}{b}{U}{ c }  ") == Bookmark("a", "b", "c")


def test_decode_rejects_wrong_segment_counts_and_markers():
    assert decode_line("not a bookmark") is None
    assert decode_line("") is None
    assert decode_line("{T}{a}{C}{b}") is None
    assert decode_line("{T}{a}{C}{b}{U}{c}{X}{d}") is None
    assert decode_line("{T}{a}{T}{b}{U}{c}") is None
    assert decode_line("{X}{a}{C}{b}{U}{c}") is None


def test_separator_helpers():
    assert separator_line(4, 4) == "-" * 16 + "\n"
    assert separator_line(100, 0) == "-" * (TITLE_MAX_LENGTH + 8) + "\n"
    assert is_separator("  ------")
    assert not is_separator("- renew the domain")
    assert not is_separator("--x--")
    assert not is_separator("   ")
    assert not is_separator("{T}{a}{C}{b}{U}{c}")


def test_add_bookmark_line_is_centred():
    line = add_bookmark_line(10, 10)
    assert ADD_BOOKMARK in line
    assert len(line) == 31
    left, right = line.split(ADD_BOOKMARK)
    assert set(left) == {"-"} and set(right) == {"-"}
    assert len(right) - len(left) in (0, 1)
    assert add_bookmark_line(0, 0) == ADD_BOOKMARK


def test_has_segment_delimiters():
    from fmark.line_codec import has_segment_delimiters

    assert has_segment_delimiters("C{++}")
    assert has_segment_delimiters("a}b")
    assert not has_segment_delimiters("C++")
