# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument
# pylint: disable=unused-variable

import pytest
from mimetype_library.content_type import extract_mime_type
from mimetype_library.matcher import build_mime_matcher


def test_extracts_mime_type_from_content_type_with_parameters():
    assert extract_mime_type("application/json; charset=utf-8") == "application/json"


def test_returns_none_for_invalid_content_type():
    assert extract_mime_type("invalid-content-type") is None


def test_returns_none_for_content_type_with_wildcard_mime_type():
    assert extract_mime_type("*/json") is None


def test_trims_whitespace_from_content_type():
    assert (
        extract_mime_type("  application/json  ; charset=utf-8  ")
        == "application/json"
    )


@pytest.mark.parametrize("content_type", ["application//json", "application/js/on"])
def test_returns_none_for_content_type_with_two_slashes(content_type: str):
    assert extract_mime_type(content_type) is None


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("application", None),
        ("application/", None),
        ("application/a", "application/a"),
        ("/json", None),
        ("  /json ", None),
        ("application/ ; charset=utf-8", None),
    ],
)
def test_rejects_content_with_missing_mime_parts(
    content_type: str, expected: str | None
):
    assert extract_mime_type(content_type) == expected


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("text/html", "text/html"),
        ("  text/html  ", "text/html"),
        ("text/html;", "text/html"),
        ("Text/HTML; charset=UTF-8", "Text/HTML"),
        ("multipart/form-data; boundary=a/b", "multipart/form-data"),
        ("application/x ml", "application/x ml"),
        ("image/svg+xml", "image/svg+xml"),
        ("application/vnd.api+json; ext=\"a;b\"", "application/vnd.api+json"),
        ("text/plain; q=*", "text/plain"),
    ],
)
def test_extraction_is_permissive(content_type: str, expected: str):
    assert extract_mime_type(content_type) == expected


@pytest.mark.parametrize(
    "content_type",
    [
        "",
        " ",
        ";",
        "/",
        "; charset=utf-8",
        ";application/json",
        "text/*",
        "text/*; charset=utf-8",
        "*/*",
        "text/plain*",
        "text;/plain",
        "a/b/c; x=1",
        "éè/à*; \U0001f600=1",
    ],
)
def test_never_raises_and_rejects_malformed(content_type: str):
    assert extract_mime_type(content_type) is None


def test_unicode_mime_is_kept_as_is():
    assert extract_mime_type("éè/à") == "éè/à"


@pytest.mark.parametrize(
    "content_type, expected_match",
    [
        ("text/html; charset=utf-8", True),
        ("application/json", True),
        ("image/png", False),
    ],
)
def test_extracted_mime_type_feeds_matcher(content_type: str, expected_match: bool):
    matcher = build_mime_matcher("application/json, text/*")

    mime_type = extract_mime_type(content_type)
    assert mime_type is not None
    assert matcher(mime_type) is expected_match
