FORM_URLENCODED = "application/x-www-form-urlencoded"


def media_type(content_type: str | None) -> str:
    """Return the lower-cased media type of a Content-Type value, without parameters."""

    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_form_urlencoded(content_type: str | None) -> bool:
    """True iff the header names ``application/x-www-form-urlencoded``, any charset."""

    return media_type(content_type) == FORM_URLENCODED
