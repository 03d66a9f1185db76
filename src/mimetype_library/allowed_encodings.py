import logging
from dataclasses import dataclass, field

from .content_type import extract_mime_type
from .errors import (
    InvalidContentTypeError,
    MissingContentTypeError,
    UnsupportedMediaTypeError,
)
from .matcher import MimeMatcher, build_mime_matcher

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AllowedEncodings:
    """Encodings accepted by e.g. a schema's input or output

    Keeps the spec together with its matcher, built once at creation time.

    Usage:

        JSON_OR_TEXT = AllowedEncodings("application/json, text/*")
        ...
        mime_type = JSON_OR_TEXT.check_content_type(request.headers.get("Content-Type"))
    """

    encodings: str
    matcher: MimeMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matcher", build_mime_matcher(self.encodings))

    def matches(self, mime: str) -> bool:
        return self.matcher(mime)

    __call__ = matches

    def check_content_type(self, content_type: str | None) -> str:
        """Extracts the mime type from a Content-Type header value and checks it is allowed

        Raises:
            MissingContentTypeError: no header or blank value
            InvalidContentTypeError: mime type cannot be extracted
            UnsupportedMediaTypeError: mime type is not among the allowed encodings
        """
        if content_type is None or not content_type.strip():
            raise MissingContentTypeError(allowed_encodings=self.encodings)

        mime_type = extract_mime_type(content_type)
        if mime_type is None:
            raise InvalidContentTypeError(content_type=content_type)

        if not self.matcher(mime_type):
            _logger.debug(
                "Rejected %s: not in allowed encodings %s",
                f"{mime_type=}",
                f"{self.encodings=}",
            )
            raise UnsupportedMediaTypeError(
                mime_type=mime_type, allowed_encodings=self.encodings
            )

        return mime_type
