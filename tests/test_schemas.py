"""
Tests for request schemas and format tags.
"""

import pytest
from starlette.datastructures import QueryParams

from image_resizer.exceptions import InvalidParameterError, UnsupportedFormatError
from image_resizer.schemas import (
    ConvertParams,
    ImageFormat,
    ResizeParams,
    ThumbnailParams,
    get_supported_formats,
    parse_dimension,
)
from image_resizer.schemas.request import MAX_DIMENSION, first_value


class TestImageFormat:
    """Tests for ImageFormat enum."""

    def test_supported_formats(self):
        """Exactly jpeg, png and gif should be supported."""
        assert get_supported_formats() == ["jpeg", "png", "gif"]

    def test_from_name(self):
        """Request names should resolve to formats."""
        assert ImageFormat.from_name("png") is ImageFormat.PNG
        assert ImageFormat.from_name("jpeg").pil_format == "JPEG"

    @pytest.mark.parametrize("name", ["bmp", "jpg", "PNG", "webp", ""])
    def test_from_name_unsupported(self, name):
        """Anything outside the exact tags should be unsupported."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ImageFormat.from_name(name)
        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "unsupported format"

    def test_from_pil(self):
        """Decoder format names should resolve case-insensitively."""
        assert ImageFormat.from_pil("GIF") is ImageFormat.GIF

    @pytest.mark.parametrize("pil_format", ["BMP", "TIFF", None])
    def test_from_pil_unsupported(self, pil_format):
        """Decodable but unsupported formats should be rejected."""
        with pytest.raises(UnsupportedFormatError):
            ImageFormat.from_pil(pil_format)


class TestParseDimension:
    """Tests for parse_dimension."""

    def test_valid(self):
        assert parse_dimension("width", "640") == 640

    def test_largest_dimension(self):
        assert parse_dimension("width", str(MAX_DIMENSION)) == MAX_DIMENSION

    @pytest.mark.parametrize(
        "raw", ["abc", "0", "-5", "1.5", "+5", "1_000", " 5", "²", "2147483648", "99999999999999999999"]
    )
    def test_invalid(self, raw):
        """Only positive plain decimal integers are dimensions."""
        with pytest.raises(InvalidParameterError) as exc_info:
            parse_dimension("width", raw)
        assert exc_info.value.message == f"invalid width: {raw}"
        assert exc_info.value.status_code == 400


class TestResizeParams:
    """Tests for ResizeParams."""

    def test_from_query(self):
        params = ResizeParams.from_query({"height": "50", "width": "70"})
        assert params.height == 50
        assert params.width == 70

    @pytest.mark.parametrize("query", [{}, {"height": "50"}, {"width": "50"}, {"height": "", "width": "5"}])
    def test_missing(self, query):
        """Either dimension missing should be reported once."""
        with pytest.raises(InvalidParameterError) as exc_info:
            ResizeParams.from_query(query)
        assert exc_info.value.message == "missing required parameters"

    def test_height_checked_first(self):
        """Height should be validated before width."""
        with pytest.raises(InvalidParameterError) as exc_info:
            ResizeParams.from_query({"height": "x", "width": "y"})
        assert exc_info.value.message == "invalid height: x"


class TestThumbnailParams:
    """Tests for ThumbnailParams."""

    def test_from_query(self):
        assert ThumbnailParams.from_query({"width": "32"}).width == 32

    def test_missing(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            ThumbnailParams.from_query({})
        assert exc_info.value.message == "missing required parameter: width"


class TestConvertParams:
    """Tests for ConvertParams."""

    def test_keeps_raw_format(self):
        """Unknown formats are resolved later, after decoding."""
        assert ConvertParams.from_query({"format": "bmp"}).format == "bmp"

    def test_missing(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            ConvertParams.from_query({"format": ""})
        assert exc_info.value.message == "missing required parameter: format"


class TestFirstValue:
    """Tests for first_value."""

    def test_repeated_key_uses_first(self):
        """A repeated parameter should resolve to its first occurrence."""
        assert first_value(QueryParams("width=5&width=abc"), "width") == "5"

    def test_absent(self):
        assert first_value(QueryParams("height=5"), "width") is None

    def test_plain_mapping(self):
        assert first_value({"width": "7"}, "width") == "7"

    def test_resize_params_use_first_value(self):
        params = ResizeParams.from_query(QueryParams("height=4&height=x&width=6"))
        assert (params.height, params.width) == (4, 6)
