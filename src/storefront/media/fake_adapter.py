"""In-memory media host for development and testing."""

from storefront.media.port import ImageHost, MediaHostError, ReleaseResult


class FakeImageHost(ImageHost):
    """Records every release and can be told to fail."""

    def __init__(self) -> None:
        self.released: list[str] = []
        self.should_fail: bool = False

    def configure(self, should_fail: bool) -> None:
        self.should_fail = should_fail

    def release(self, storage_id: str) -> ReleaseResult:
        if self.should_fail:
            raise MediaHostError(f"Could not release {storage_id}")
        self.released.append(storage_id)
        return ReleaseResult(storage_id=storage_id, released=True, detail="ok")
