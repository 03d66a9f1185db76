from .mimetype_constants import PARAMETERS_SEPARATOR, SUBTYPE_SEPARATOR, WILDCARD


def extract_mime_type(content_type: str) -> str | None:
    """Returns the bare 'type/subtype' of a Content-Type header value or None if malformed

    e.g. '  application/json ; charset=utf-8' -> 'application/json'

    Rejects values without a slash, with more than one slash or with a
    wildcard up to the parameters (anywhere if there are none). Anything else
    (case, subtype characters, inner blanks) is kept as-is since the result is
    only ever matched against a trusted set of allowed encodings
    (see matcher.build_mime_matcher).
    """
    semicolon_index = content_type.find(PARAMETERS_SEPARATOR)

    # NOTE: bounds include the semicolon position itself. Without parameters the
    # whole value is searched, so wildcards anywhere (e.g. 'text/*') are rejected
    end = None if semicolon_index == -1 else semicolon_index + 1

    slash_index = content_type.rfind(SUBTYPE_SEPARATOR, 0, end)
    if (
        slash_index == -1
        or content_type.rfind(SUBTYPE_SEPARATOR, 0, slash_index) != -1
        or content_type.rfind(WILDCARD, 0, end) != -1
    ):
        return None

    mime = (
        content_type.strip()
        if semicolon_index == -1
        else content_type[:semicolon_index].strip()
    )

    # missing type or subtype
    if mime.startswith(SUBTYPE_SEPARATOR) or mime.endswith(SUBTYPE_SEPARATOR):
        return None

    return mime
