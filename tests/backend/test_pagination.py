"""
Tests for pagination helpers.

These tests verify:
- page / limit clamping of raw query values
- page selector window for the collection page
"""

import pytest


class TestClamping:
    """Tests for clamp_page and clamp_limit."""

    @pytest.mark.parametrize("raw,expected", [
        (None, 1),
        ("", 1),
        ("abc", 1),
        ("0", 1),
        ("-4", 1),
        ("1", 1),
        ("7", 7),
        (" 3 ", 3),
        (2, 2),
        (2.0, 2),
        (2.5, 1),
        (True, 1),
    ])
    def test_clamp_page(self, raw, expected):
        from mdbui.core.pagination import clamp_page

        assert clamp_page(raw) == expected

    @pytest.mark.parametrize("raw,expected", [
        (None, 20),
        ("abc", 20),
        ("0", 20),
        ("-1", 20),
        ("101", 20),
        ("1", 1),
        ("100", 100),
        ("50", 50),
        (500, 20),
    ])
    def test_clamp_limit(self, raw, expected):
        from mdbui.core.pagination import clamp_limit

        assert clamp_limit(raw) == expected

    @pytest.mark.parametrize("raw", ["x", "-10", "0", "99999", None, 3.7, [], {}])
    def test_clamped_values_always_in_range(self, raw):
        from mdbui.core.pagination import clamp_limit, clamp_page

        assert clamp_page(raw) >= 1
        assert 0 < clamp_limit(raw) <= 100

    @pytest.mark.parametrize("raw,expected", [
        (None, 5),
        ("0", 5),
        ("150", 150),
        ("200", 200),
        ("201", 5),
    ])
    def test_clamp_limit_uses_configured_bounds(self, raw, expected):
        from mdbui.core.pagination import clamp_limit

        assert clamp_limit(raw, default=5, maximum=200) == expected


class TestPageWindow:
    """Tests for build_page_window."""

    def test_empty_collection_has_one_page(self):
        from mdbui.core.pagination import build_page_window

        window = build_page_window(total=0, page=1, limit=20)

        assert window.total_pages == 1
        assert window.page_numbers == [1]
        assert window.start == 0
        assert window.end == 0

    def test_window_is_clamped_at_the_start(self):
        from mdbui.core.pagination import build_page_window

        window = build_page_window(total=200, page=1, limit=20)

        assert window.total_pages == 10
        assert window.page_numbers == [1, 2, 3]

    def test_window_surrounds_middle_page(self):
        from mdbui.core.pagination import build_page_window

        window = build_page_window(total=200, page=5, limit=20)

        assert window.page_numbers == [3, 4, 5, 6, 7]
        assert window.start == 81
        assert window.end == 100

    def test_last_partial_page(self):
        from mdbui.core.pagination import build_page_window

        window = build_page_window(total=45, page=3, limit=20)

        assert window.total_pages == 3
        assert window.page_numbers == [1, 2, 3]
        assert window.start == 41
        assert window.end == 45

    def test_page_past_the_end_has_empty_range(self):
        from mdbui.core.pagination import build_page_window

        window = build_page_window(total=5, page=3, limit=20)

        assert window.total_pages == 1
        assert window.start == 0
        assert window.end == 0
        assert window.page_numbers == [1]
