"""Media host factory.

Provides get_image_host() / set_image_host() to swap implementations:
- FakeImageHost for development and testing
- CloudinaryImageHost when Cloudinary credentials are configured
"""

from storefront.media.fake_adapter import FakeImageHost
from storefront.media.port import ImageHost

_current_host: ImageHost | None = None


def get_image_host() -> ImageHost:
    """Return the current media host. Defaults to FakeImageHost."""
    global _current_host
    if _current_host is None:
        _current_host = FakeImageHost()
    return _current_host


def set_image_host(host: ImageHost) -> None:
    global _current_host
    _current_host = host


def reset_image_host() -> None:
    global _current_host
    _current_host = None
