"""
Tests for URL and map helpers.
"""

import pytest

from rest_resource.core.exceptions import ConfigurationError
from rest_resource.core.utils import (
    build_query,
    join_path,
    merge_maps,
    sanitize_headers,
    sanitize_url,
    site_key,
    split_path_query,
    split_site,
)


class TestBuildQuery:

    def test_simple(self):
        assert build_query({"id": "7"}) == "id=7"

    def test_order_is_preserved(self):
        assert build_query({"b": 1, "a": 2}) == "b=1&a=2"

    def test_escaping(self):
        assert build_query({"q": "a b&c", "k y": "ü"}) == "q=a+b%26c&k+y=%C3%BC"

    def test_none_value_is_bare_key(self):
        assert build_query({"flag": None, "page": 2}) == "flag&page=2"

    def test_empty(self):
        assert build_query({}) == ""
        assert build_query(None) == ""


class TestMergeMaps:

    def test_right_biased(self):
        assert merge_maps({"a": 1}, {"a": 2}) == {"a": 2}

    def test_order(self):
        merged = merge_maps({"a": 1, "b": 2}, {"c": 3, "a": 9})
        assert list(merged.items()) == [("a", 9), ("b", 2), ("c", 3)]

    def test_inputs_not_mutated(self):
        base, override = {"a": 1}, {"b": 2}
        merge_maps(base, override)
        assert base == {"a": 1}
        assert override == {"b": 2}

    def test_none_inputs(self):
        assert merge_maps(None, None) == {}
        assert merge_maps({"a": 1}, None) == {"a": 1}


class TestJoinPath:

    @pytest.mark.parametrize("base,path,expected", [
        ("", "users", "/users"),
        ("/", "users", "/users"),
        ("/api", "users", "/api/users"),
        ("/api/", "users", "/api/users"),
        ("/api/v1", "../v2/users", "/api/v2/users"),
        ("/api", "./users", "/api/users"),
        ("/api", "/other", "/other"),
        ("/users", "7", "/users/7"),
    ])
    def test_resolution(self, base, path, expected):
        assert join_path(base, path) == expected

    def test_empty_path_keeps_base(self):
        assert join_path("/api", "") == "/api"

    @pytest.mark.parametrize("a,b", [("users", "7"), ("v1", "users"), ("a/b", "c")])
    def test_associative(self, a, b):
        assert join_path(join_path("/root", a), b) == join_path("/root", f"{a}/{b}")


class TestSplitPathQuery:

    def test_without_query(self):
        assert split_path_query("users") == ("users", {})

    def test_with_query(self):
        assert split_path_query("users?active=1&x=") == ("users", {"active": "1", "x": ""})


class TestSplitSite:

    def test_full_url(self):
        root, path, query = split_site("https://u:p@api.example.com:8443/v1?x=1")
        assert root == "https://api.example.com:8443"
        assert path == "/v1"
        assert query == {"x": "1"}

    def test_plain_host(self):
        assert split_site("http://api.example.com") == ("http://api.example.com", "", {})

    @pytest.mark.parametrize("site", ["", None, "ftp://example.com", "api.example.com", "https://"])
    def test_invalid(self, site):
        with pytest.raises(ConfigurationError):
            split_site(site)

    def test_site_key_default_ports(self):
        assert site_key("https://api.example.com") == ("https", "api.example.com", 443)
        assert site_key("http://api.example.com") == ("http", "api.example.com", 80)
        assert site_key("http://api.example.com:8080") == ("http", "api.example.com", 8080)


class TestSanitize:

    def test_sanitize_url_masks_tokens(self):
        url = sanitize_url("https://api.example.com/data?api_key=secret&page=2")
        assert url == "https://api.example.com/data?api_key=REDACTED&page=2"

    def test_sanitize_url_without_query(self):
        assert sanitize_url("https://api.example.com/data") == "https://api.example.com/data"

    def test_sanitize_headers(self):
        headers = sanitize_headers({"Authorization": "Basic abc", "Accept": "application/json"})
        assert headers == {"Authorization": "REDACTED", "Accept": "application/json"}
