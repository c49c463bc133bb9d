"""Media host port (abstract interface).

Product and banner images are uploaded straight to the media host by the
admin client; the storefront only keeps ``{url, storage_id}`` pairs and asks
the host to release a ``storage_id`` once nothing references it any more.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class MediaHostError(Exception):
    """The media host could not be reached or rejected the request."""


@dataclass(frozen=True)
class ReleaseResult:
    storage_id: str
    released: bool
    detail: str | None = None


class ImageHost(ABC):
    """Abstract media host interface."""

    @abstractmethod
    def release(self, storage_id: str) -> ReleaseResult:
        """Delete the asset stored under ``storage_id``.

        An asset that is already gone is not an error: the result simply
        reports ``released=False``.
        """
        ...
