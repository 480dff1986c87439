import pytest
from urlcanon.core.percent import RESERVED_CHARS, unescape, escape, escape_full, form_url_encode


@pytest.mark.parametrize(
	"raw,expected",
	[
		("%2525252525252525", "%"),
		("%25%32%35", "%"),
		("%25%32%35%25%32%35", "%%"),
		("asdf%25%32%35asd", "asdf%asd"),
		("%%%25%32%35asd%%", "%%%asd%%"),
		("%2E%73%65%63%75%72%65", ".secure"),
		("a%2fb", "a/b"),
	],
)
def test_unescape_to_fixpoint(raw, expected):
	assert unescape(raw) == expected


@pytest.mark.parametrize("raw", ["%", "%2", "%zz", "100%", "%g0"])
def test_unescape_keeps_invalid_sequences(raw):
	assert unescape(raw) == raw


def test_unescape_is_idempotent():
	for raw in ["%2525252525252525", "%%%25%32%35asd%%", "a%20b%2", "%25f%255E"]:
		once = unescape(raw)
		assert unescape(once) == once


def test_unescape_many_layers_is_iterative():
	assert unescape("%" + "25" * 1000) == "%"


def test_unescape_deep_nesting_is_linear():
	assert unescape("%" + "25" * 200000 + "41") == "A"
	assert unescape("x%" + "25" * 200000) == "x%"


def test_unescape_decodes_utf8():
	assert unescape("%C3%A9") == "\u00e9"
	assert unescape("%E2%82%AC") == "\u20ac"
	# a byte that is not valid UTF-8 survives as a surrogate escape
	assert unescape("%E9") == "\udce9"
	assert escape(unescape("%E9")) == "%E9"


def test_unescape_length_and_none():
	assert unescape("%41%42", 3) == "A"
	assert unescape(None) is None


def test_escape_safe_policy():
	assert escape("http://host/a b#c%d") == "http://host/a%20b%23c%25d"
	assert escape(b"\x01\x80\x7f") == "%01%80%7F"
	assert escape("~!*'();:@&=+$,/?[]") == "~!*'();:@&=+$,/?[]"


def test_escape_text_is_utf8_encoded():
	assert escape("€") == "%E2%82%AC"
	assert escape("\u00e9") == "%C3%A9"
	assert escape("\u00e9\u20ac") == "%C3%A9%E2%82%AC"
	assert escape(b"\xff") == "%FF"


def test_escape_full_policy():
	assert escape_full("a/b?c=d") == "a%2Fb%3Fc%3Dd"
	assert escape_full("http://evil.com/foo;") == "http%3A%2F%2Fevil.com%2Ffoo%3B"
	assert escape_full("a b") == "a%20b"


def test_form_url_encode():
	assert form_url_encode("a b&c") == "a+b%26c"
	assert form_url_encode("a%20b") == "a+b"
	assert form_url_encode("put some value here; value3") == "put+some+value+here%3B+value3"


def test_reserved_chars():
	assert isinstance(RESERVED_CHARS, frozenset)
	assert RESERVED_CHARS == set("!*'();:@&=+$,/?#[]")
