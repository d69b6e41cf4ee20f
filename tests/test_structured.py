"""Tests for scopeexporter.extractors.structured."""

from __future__ import annotations

from scopeexporter.categories import Category
from scopeexporter.extractors.structured import extract_structured, rows_from_html

# ---------------------------------------------------------------------------
# extract_structured()
# ---------------------------------------------------------------------------


class TestExtractStructured:
    def test_groups_by_type_label(self):
        rows = [["a.com", "Domain"], ["x", "unknown"], ["foo/bar", "GitHub"]]
        assert extract_structured(rows) == {
            Category.DOMAIN: ["a.com"],
            Category.IOS_APP: [],
            Category.ANDROID: [],
            Category.GITHUB: ["foo/bar"],
        }

    def test_empty_input_has_every_category(self):
        result = extract_structured([])
        assert set(result) == set(Category)
        assert all(v == [] for v in result.values())

    def test_unclassifiable_rows_dropped(self):
        result = extract_structured([["x", "y"]])
        assert all(v == [] for v in result.values())

    def test_short_rows_ignored(self):
        result = extract_structured([["lonely.com"], [], ["b.com", "Domain"]])
        assert result[Category.DOMAIN] == ["b.com"]

    def test_cells_trimmed(self):
        result = extract_structured([["  a.com \n", "  Domain  "]])
        assert result[Category.DOMAIN] == ["a.com"]

    def test_internal_whitespace_kept(self):
        result = extract_structured([["Acme Wallet app", "iOS"]])
        assert result[Category.IOS_APP] == ["Acme Wallet app"]

    def test_row_order_and_duplicates_preserved(self):
        rows = [["b.com", "Domain"], ["a.com", "Domain"], ["b.com", "Domain"]]
        assert extract_structured(rows)[Category.DOMAIN] == ["b.com", "a.com", "b.com"]

    def test_extra_columns_ignored(self):
        rows = [["com.acme", "Google Play Store", "Critical", "Eligible"]]
        assert extract_structured(rows)[Category.ANDROID] == ["com.acme"]

    def test_accepts_tuples(self):
        rows = [("a.com", "Domain")]
        assert extract_structured(rows)[Category.DOMAIN] == ["a.com"]


# ---------------------------------------------------------------------------
# rows_from_html()
# ---------------------------------------------------------------------------


class TestRowsFromHtml:
    def test_fixture_rows(self, scope_table_html):
        rows = rows_from_html(scope_table_html)
        assert len(rows) == 6
        assert rows[0] == ["api.example.com", "Domain", "Critical"]

    def test_header_cells_not_columns(self):
        html = "<table><tr><th>Asset</th><th>Type</th></tr></table>"
        assert rows_from_html(html) == []

    def test_single_cell_rows_skipped(self):
        html = "<table><tr><td>only</td></tr><tr><td>a.com</td><td>Domain</td></tr></table>"
        assert rows_from_html(html) == [["a.com", "Domain"]]

    def test_nested_markup_flattened(self):
        html = (
            "<table><tr><td><a href='#'><strong>a.com</strong></a></td>"
            "<td><span>Wildcard</span>\n  <span>Domain</span></td></tr></table>"
        )
        assert rows_from_html(html) == [["a.com", "Wildcard Domain"]]

    def test_rows_outside_table_ignored(self):
        assert rows_from_html("<div><p>a.com</p><p>Domain</p></div>") == []

    def test_empty_html(self):
        assert rows_from_html("") == []
        assert rows_from_html("   ") == []
