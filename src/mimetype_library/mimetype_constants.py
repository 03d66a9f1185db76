"""
A media type (also known as a Multipurpose Internet Mail Extensions or MIME type)
indicates the nature and format of a document, file, or assortment of bytes.

MIME types are defined and standardized in IETF's RFC 6838.


SEE https://developer.mozilla.org/en-US/docs/Web/HTTP/Basics_of_HTTP/MIME_types
"""

from typing import Final

# NOTE: mimetypes (https://docs.python.org/3/library/mimetypes.html) is already a module in python

MIMETYPE_ANY: Final[str] = "*/*"

MIMETYPE_APPLICATION_JSON: Final[str] = "application/json"
MIMETYPE_APPLICATION_ND_JSON: Final[str] = "application/x-ndjson"
MIMETYPE_APPLICATION_OCTET_STREAM: Final[str] = "application/octet-stream"
MIMETYPE_APPLICATION_CBOR: Final[str] = "application/cbor"
MIMETYPE_APPLICATION_ZIP: Final[str] = "application/zip"
MIMETYPE_IMAGE_ANY: Final[str] = "image/*"
MIMETYPE_TEXT_ANY: Final[str] = "text/*"
MIMETYPE_TEXT_HTML: Final[str] = "text/html"
MIMETYPE_TEXT_PLAIN: Final[str] = "text/plain"

# Delimiters in allowed-encodings specs and Content-Type headers
ENCODINGS_SEPARATOR: Final[str] = ","
PARAMETERS_SEPARATOR: Final[str] = ";"
SUBTYPE_SEPARATOR: Final[str] = "/"
WILDCARD: Final[str] = "*"
