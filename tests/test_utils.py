"""
Utility tests: plain text, title heuristic, date normalization, URLs.
"""

import pytest

from mf2interpret.models import Mf2Item, RenderedText, ValueText
from mf2interpret.utils.datetime_utils import DateFormatError, normalize_dt
from mf2interpret.utils.text_utils import all_plain_text, get_plain_text, is_name_a_title
from mf2interpret.utils.url_utils import (
    convert_relative_paths_to_absolute,
    is_http_url,
    is_uri,
    url_equal,
)


# =============================================================================
# Plain text
# =============================================================================

class TestPlainText:

    def test_empty(self):
        assert get_plain_text(None) is None
        assert get_plain_text([]) is None

    def test_string(self):
        assert get_plain_text(["  hello "]) == "  hello "
        assert get_plain_text(["  hello "], strip=True) == "hello"

    def test_objects_use_value(self):
        assert get_plain_text([RenderedText(html="<b>x</b>", value="x")]) == "x"
        assert get_plain_text([ValueText(value="https://img", alt="cat")]) == "https://img"

    def test_nested_item(self):
        assert get_plain_text([Mf2Item(type=["h-card"], value="Jane")]) == "Jane"
        assert get_plain_text([Mf2Item(type=["h-card"])]) is None

    def test_only_first_value(self):
        assert get_plain_text(["one", "two"]) == "one"

    def test_all_plain_text_skips_valueless_items(self):
        values = ["a", Mf2Item(type=["h-card"]), ValueText(value="b")]
        assert all_plain_text(values) == ["a", "b"]


class TestIsNameATitle:

    def test_no_content(self):
        assert is_name_a_title("anything", None)
        assert is_name_a_title("anything", "")

    def test_no_name(self):
        assert not is_name_a_title(None, "some content")

    def test_identical(self):
        assert not is_name_a_title("this is an awesome note", "this is an awesome note")

    def test_implied_name_contains_content(self):
        assert not is_name_a_title(
            "Hello, World! posted by Jane",
            "hello world",
        )

    def test_punctuation_case_and_spacing_ignored(self):
        assert not is_name_a_title("It's  a\nNOTE.", "its a note")

    def test_compatibility_forms(self):
        assert not is_name_a_title("ﬁne day", "fine day")

    def test_distinct_title(self):
        assert is_name_a_title("this is the title", "this is an awesome article")


# =============================================================================
# Dates
# =============================================================================

class TestNormalizeDt:

    def test_canonical_unchanged(self):
        assert normalize_dt("2022-01-15T13:00:00Z") == "2022-01-15T13:00:00Z"

    def test_date_only_padded(self):
        assert normalize_dt("2022-1-5") == "2022-01-05"

    def test_space_separator_and_missing_seconds(self):
        assert normalize_dt("2022-01-15 9:30") == "2022-01-15T09:30:00"

    def test_fraction_dropped(self):
        assert normalize_dt("2022-01-15T13:00:00.123456Z") == "2022-01-15T13:00:00Z"

    def test_offset_without_colon(self):
        assert normalize_dt("2022-01-15T13:00:00-0800") == "2022-01-15T13:00:00-08:00"

    def test_short_offset_hour(self):
        assert normalize_dt("2022-01-15T13:00:00+5:30") == "2022-01-15T13:00:00+05:30"

    def test_trailing_token_ignored(self):
        assert normalize_dt("2022-01-15 13:00 PST") == "2022-01-15T13:00:00"

    def test_unparseable(self):
        with pytest.raises(DateFormatError):
            normalize_dt("last tuesday")

    def test_empty(self):
        with pytest.raises(DateFormatError):
            normalize_dt("")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_dt("2022/01/15")


# =============================================================================
# URLs
# =============================================================================

class TestIsUri:

    @pytest.mark.parametrize("value", [
        "https://example.com/post/1",
        "http://example.com",
        "mailto:jane@example.com",
        "urn:isbn:0451450523",
        "https://example.com/a%20b?q=1#frag",
    ])
    def test_valid(self, value):
        assert is_uri(value)

    @pytest.mark.parametrize("value", [
        None,
        "",
        "not a uri",
        "/relative/path",
        "example.com",
        "https://example.com/%zz",
        "1http://example.com",
        "https://example.com/<tag>",
    ])
    def test_invalid(self, value):
        assert not is_uri(value)


class TestUrlHelpers:

    def test_is_http_url(self):
        assert is_http_url("https://a")
        assert is_http_url("http://a")
        assert not is_http_url("ftp://a")
        assert not is_http_url("Jane")

    def test_url_equal_trailing_slash(self):
        assert url_equal("https://a.com/", "https://a.com")
        assert url_equal("https://a.com", "https://a.com/")
        assert not url_equal("https://a.com/x", "https://a.com")


class TestConvertRelativePaths:

    def test_anchor(self):
        html = (
            "this is a title\nhello there.\n\n<a href=\"greetings.html\">stuff</a>\n\n"
            "another hello\n\n<a href=\"blah.html\">stuff</a>"
        )
        converted = convert_relative_paths_to_absolute("https://site.com", None, html)
        assert converted == (
            "this is a title\nhello there.\n\n<a href=\"https://site.com/greetings.html\">stuff</a>\n\n"
            "another hello\n\n<a href=\"https://site.com/blah.html\">stuff</a>"
        )

    def test_single_quotes_preserved(self):
        html = "<img alt='x' src='pic.jpg'>"
        converted = convert_relative_paths_to_absolute("https://site.com/blog/post", None, html)
        assert converted == "<img alt='x' src='https://site.com/blog/pic.jpg'>"

    def test_base_href(self):
        html = '<a href="x.html">x</a>'
        converted = convert_relative_paths_to_absolute("https://site.com/blog/post", "/static/", html)
        assert converted == '<a href="https://site.com/static/x.html">x</a>'

    def test_video_src_and_poster(self):
        html = '<video src="v.mp4" poster="p.jpg"></video>'
        converted = convert_relative_paths_to_absolute("https://site.com/", None, html)
        assert converted == '<video src="https://site.com/v.mp4" poster="https://site.com/p.jpg"></video>'

    def test_absolute_untouched(self):
        html = '<a href="https://other.org/page">x</a>'
        assert convert_relative_paths_to_absolute("https://site.com", None, html) == html

    def test_data_attribute_before_src(self):
        html = '<img data-src="lazy.png" src="real.png">'
        converted = convert_relative_paths_to_absolute("https://site.com/", None, html)
        assert converted == '<img data-src="lazy.png" src="https://site.com/real.png">'

    def test_data_href_not_rewritten(self):
        html = '<a data-href="x.html" href="y.html">y</a>'
        converted = convert_relative_paths_to_absolute("https://site.com/", None, html)
        assert converted == '<a data-href="x.html" href="https://site.com/y.html">y</a>'

    def test_other_tags_untouched(self):
        html = '<abbr title="x">y</abbr><div data-src="z.png">w</div>'
        assert convert_relative_paths_to_absolute("https://site.com", None, html) == html

    def test_empty_inputs(self):
        assert convert_relative_paths_to_absolute("https://site.com", None, "") == ""
        assert convert_relative_paths_to_absolute("", None, '<a href="x">') == '<a href="x">'
