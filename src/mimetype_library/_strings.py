from .mimetype_constants import SUBTYPE_SEPARATOR, WILDCARD

_WILDCARD_SUFFIX = f"{SUBTYPE_SEPARATOR}{WILDCARD}"
_WILDCARD_TYPE_PREFIX = f"{WILDCARD}{SUBTYPE_SEPARATOR}"


def is_mime_like(encoding: str) -> bool:
    """True for a concrete 'type/subtype' token: one slash, no wildcard, no blank"""
    return (
        WILDCARD not in encoding
        and " " not in encoding
        and encoding.count(SUBTYPE_SEPARATOR) == 1
    )


def is_wildcard_encoding(encoding: str) -> bool:
    # 'type/*' with a non-empty type. NOT '*/subtype' nor '*/*'
    return (
        len(encoding) > len(_WILDCARD_SUFFIX)
        and encoding.endswith(_WILDCARD_SUFFIX)
        and not encoding.startswith(_WILDCARD_TYPE_PREFIX)
    )


def strip_last_char(value: str) -> str:
    return value[:-1]
