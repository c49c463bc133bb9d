"""URL slugs derived from product names."""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(value: str | None) -> str:
    """Lowercase ``value``, collapse every run of non ``[a-z0-9]`` characters
    into a single hyphen and trim hyphens from both ends.

    >>> slugify("USB  Cable!!")
    'usb-cable'
    """
    if not value:
        return ""
    return _NON_ALPHANUMERIC.sub("-", value.lower()).strip("-")
