"""
Tests for tool argument validators
"""

import pytest

from fakestore_mcp.services.fakestore.errors import ValidationError
from fakestore_mcp.tools.validators import (
    build_list_params,
    sanitize_path_segment,
    validate_email,
    validate_limit,
    validate_positive_integer,
    validate_positive_number,
    validate_sort_order,
    validate_string,
    validate_url,
)

NOT_POSITIVE_INTEGERS = [0, -1, -100, 1.5, 2.0, "1", None, True, False, [], {}]


class TestPositiveInteger:

    @pytest.mark.parametrize("value", [1, 7, 10_000])
    def test_accepts_positive_integers(self, value):
        validate_positive_integer(value, "Product ID")

    @pytest.mark.parametrize("value", NOT_POSITIVE_INTEGERS)
    def test_rejects_everything_else(self, value):
        with pytest.raises(ValidationError, match="Product ID must be a positive integer"):
            validate_positive_integer(value, "Product ID")


class TestLimit:

    def test_absent_limit_is_allowed(self):
        validate_limit(None)

    def test_accepts_positive_integer(self):
        validate_limit(5)

    @pytest.mark.parametrize("value", [0, -3, 2.5, "5", True])
    def test_rejects_invalid_limit(self, value):
        with pytest.raises(ValidationError, match="Limit must be a positive integer"):
            validate_limit(value)


class TestSortOrder:

    @pytest.mark.parametrize("value", ["asc", "desc", None])
    def test_accepts_defined_tokens(self, value):
        validate_sort_order(value)

    @pytest.mark.parametrize("value", ["ASC", "Desc", "DESC", "", "ascending", " asc", 1])
    def test_rejects_other_values_including_case_variants(self, value):
        with pytest.raises(ValidationError, match='Sort order must be "asc" or "desc"'):
            validate_sort_order(value)


class TestStrings:

    def test_accepts_text(self):
        validate_string("electronics", "Category")

    @pytest.mark.parametrize("value", ["", "   ", None, 3, ["a"]])
    def test_rejects_empty_or_non_string(self, value):
        with pytest.raises(ValidationError, match="Category must be a non-empty string"):
            validate_string(value, "Category")


class TestPositiveNumber:

    @pytest.mark.parametrize("value", [19.99, 1, 0.01])
    def test_accepts_positive(self, value):
        validate_positive_number(value, "Price")

    @pytest.mark.parametrize("value", [
        0, -5, -0.5, "19.99", None, True, float("nan"), float("inf"), float("-inf"),
    ])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValidationError, match="Price must be a positive number"):
            validate_positive_number(value, "Price")


class TestEmail:

    def test_accepts_simple_address(self):
        validate_email("john@gmail.com")

    @pytest.mark.parametrize("value", ["john", "john@gmail", "jo hn@gmail.com", "@gmail.com", "", None])
    def test_rejects_malformed_address(self, value):
        with pytest.raises(ValidationError, match="Invalid email format"):
            validate_email(value)


class TestUrl:

    @pytest.mark.parametrize("value", ["https://i.pravatar.cc/image.png", "http://example.com/a.jpg"])
    def test_accepts_http_urls(self, value):
        validate_url(value, "Image URL")

    @pytest.mark.parametrize("value", ["ftp://example.com/a.jpg", "example.com/a.jpg", "https://", "", None])
    def test_rejects_other_urls(self, value):
        with pytest.raises(ValidationError, match=r"Image URL must be a valid http\(s\) URL"):
            validate_url(value, "Image URL")

    @pytest.mark.parametrize("value", [" https://x.com/a.png", "https://x.com/a.png\n", "https://x.com/my image.png"])
    def test_rejects_whitespace_instead_of_stripping_it(self, value):
        with pytest.raises(ValidationError, match=r"Image URL must be a valid http\(s\) URL"):
            validate_url(value, "Image URL")


class TestPathSegment:

    def test_encodes_slash(self):
        assert sanitize_path_segment("electronics/accessories") == "electronics%2Faccessories"

    def test_matches_uri_component_encoding(self):
        assert sanitize_path_segment("men's clothing") == "men's%20clothing"
        assert sanitize_path_segment("a?b#c&d") == "a%3Fb%23c%26d"

    def test_leaves_plain_text_alone(self):
        assert sanitize_path_segment("jewelery") == "jewelery"


class TestListParams:

    def test_only_supplied_parameters_are_sent(self):
        assert build_list_params({}) == {}
        assert build_list_params({"limit": 5}) == {"limit": 5}
        assert build_list_params({"limit": 5, "sort": "desc"}) == {"limit": 5, "sort": "desc"}

    def test_none_counts_as_absent(self):
        assert build_list_params({"limit": None, "sort": None}) == {}

    def test_invalid_values_raise(self):
        with pytest.raises(ValidationError):
            build_list_params({"sort": "up"})
        with pytest.raises(ValidationError):
            build_list_params({"limit": 0})
