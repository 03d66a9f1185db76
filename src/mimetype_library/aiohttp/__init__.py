""" aiohttp adapter: checks the Content-Type of incoming requests against allowed encodings

Requires the 'aiohttp' extra
"""

import logging
from collections.abc import Iterable
from typing import Final

from aiohttp import hdrs, web

from ..allowed_encodings import AllowedEncodings
from ..errors import (
    InvalidContentTypeError,
    MimeTypeLibraryError,
    MissingContentTypeError,
    UnsupportedMediaTypeError,
)
from ..logging_utils import log_context

_logger = logging.getLogger(__name__)


MIME_TYPE_REQUEST_KEY: Final[str] = f"{__name__}.mime_type"

_METHODS_WITH_BODY: Final[tuple[str, ...]] = (
    hdrs.METH_PATCH,
    hdrs.METH_POST,
    hdrs.METH_PUT,
)

_ERROR_TO_HTTP_ERROR: Final[
    dict[type[MimeTypeLibraryError], type[web.HTTPError]]
] = {
    InvalidContentTypeError: web.HTTPBadRequest,
    MissingContentTypeError: web.HTTPUnsupportedMediaType,
    UnsupportedMediaTypeError: web.HTTPUnsupportedMediaType,
}


def get_request_mime_type(request: web.Request, allowed: AllowedEncodings) -> str:
    """Returns the request's mime type if allowed

    Raises:
        web.HTTPBadRequest: malformed Content-Type
        web.HTTPUnsupportedMediaType: missing or not allowed Content-Type
    """
    try:
        return allowed.check_content_type(request.headers.get(hdrs.CONTENT_TYPE))
    except MimeTypeLibraryError as err:
        http_error_cls = _ERROR_TO_HTTP_ERROR.get(
            type(err), web.HTTPUnsupportedMediaType
        )
        raise http_error_cls(text=f"{err}") from err


def content_type_middleware_factory(
    allowed: AllowedEncodings, *, methods: Iterable[str] = _METHODS_WITH_BODY
):
    checked_methods = frozenset(m.upper() for m in methods)

    @web.middleware
    async def _middleware(request: web.Request, handler):
        if request.method in checked_methods:
            request[MIME_TYPE_REQUEST_KEY] = get_request_mime_type(request, allowed)
        return await handler(request)

    return _middleware


def setup_content_type_checks(
    app: web.Application,
    allowed: AllowedEncodings,
    *,
    methods: Iterable[str] = _METHODS_WITH_BODY,
) -> None:
    with log_context(
        _logger,
        logging.INFO,
        "Setup content-type checks for %s",
        f"{allowed.encodings=}",
    ):
        app.middlewares.append(
            content_type_middleware_factory(allowed, methods=methods)
        )


__all__: tuple[str, ...] = (
    "MIME_TYPE_REQUEST_KEY",
    "content_type_middleware_factory",
    "get_request_mime_type",
    "setup_content_type_checks",
)
