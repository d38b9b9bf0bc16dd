"""Tests for the usage extractor."""

import pytest

from token_utilities.extract import ClassExtractor, is_valid_class_name


# ---------------------------------------------------------------------------
# Candidate filter
# ---------------------------------------------------------------------------


class TestIsValidClassName:
    @pytest.mark.parametrize("name", ["p-4", "hover:flex", "md:p-8", "w_full", "gap-0.5", "A1"])
    def test_accepted(self, name):
        assert is_valid_class_name(name)

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "http://example.com",
            "C:\\temp",
            "/images/logo.png",
            "fn(x)",
            "{a}",
            "[0]",
            "a b",
            "w-1/2",
            "hello!",
        ],
    )
    def test_rejected(self, name):
        assert not is_valid_class_name(name)

    def test_length_limit(self):
        assert is_valid_class_name("a" * 100)
        assert not is_valid_class_name("a" * 101)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class TestClassExtractor:
    def test_class_name_attribute(self):
        assert ClassExtractor().extract('className="hover:flex  p-4"') == {"hover:flex", "p-4"}

    def test_url_rejected(self):
        assert ClassExtractor().extract('className="http://example.com"') == set()

    def test_html_class(self):
        html = '<a class="text-primary rounded-full" href="/home">'
        assert ClassExtractor().extract(html) == {"text-primary", "rounded-full"}

    def test_single_quotes_and_backticks(self):
        source = "cn('flex', `grid ${x}`)"
        assert ClassExtractor().extract(source) >= {"flex", "grid"}

    def test_clsx_call(self):
        source = 'clsx("p-4", isActive && "bg-primary")'
        assert ClassExtractor().extract(source) == {"p-4", "bg-primary"}

    def test_unterminated_quote(self):
        assert ClassExtractor().extract('className="flex p-4') == set()

    def test_no_matcher(self):
        assert ClassExtractor().extract('const label = "flex p-4";') == set()

    def test_custom_matcher(self):
        source = 'tw("mt-2 mb-2")'
        assert ClassExtractor().extract(source) == set()
        assert ClassExtractor(["tw"]).extract(source) == {"mt-2", "mb-2"}

    def test_matchers_deduplicated(self):
        extractor = ClassExtractor(["class", "tw", "tw", ""])
        assert extractor.matchers.count("class") == 1
        assert extractor.matchers[-1] == "tw"

    def test_scan_window(self):
        source = "className=" + " " * 600 + '"far-away"'
        assert ClassExtractor().extract(source) == set()

    def test_multiple_occurrences(self):
        source = '<p class="a-1"></p>' + "x" * 600 + '<p class="b-2"></p>'
        assert ClassExtractor().extract(source) == {"a-1", "b-2"}

    def test_binary_like_text(self):
        assert ClassExtractor().extract("class\x00\"\x01'`") == set()
