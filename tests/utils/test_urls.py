"""
Tests for URL normalization.
"""

import pytest

from quicklauncher.utils.urls import has_scheme, normalize_url


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("example.com", "https://example.com"),
            ("www.example.com/docs", "https://www.example.com/docs"),
            ("example.com:8080/api", "https://example.com:8080/api"),
            ("myapp://open", "myapp://open"),
            ("https://x.com", "https://x.com"),
            ("HTTP://X.COM", "HTTP://X.COM"),
            ("mailto:someone@example.com", "mailto:someone@example.com"),
            ("tel:+15551234", "tel:+15551234"),
            ("not a url", "not a url"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_url(raw) == expected

    def test_custom_scheme_untouched(self):
        assert normalize_url("obsidian://open?vault=notes") == "obsidian://open?vault=notes"

    def test_port_is_not_a_scheme(self):
        assert not has_scheme("example.com:8080")
        assert has_scheme("mailto:a@b.co")
