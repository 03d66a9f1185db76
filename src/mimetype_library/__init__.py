""" matching of media (MIME) types against allowed encodings

"""

from .content_type import extract_mime_type
from .allowed_encodings import AllowedEncodings
from .matcher import MimeMatcher, build_mime_matcher

__version__ = "0.1.0"

__all__: tuple[str, ...] = (
    "AllowedEncodings",
    "MimeMatcher",
    "build_mime_matcher",
    "extract_mime_type",
)
