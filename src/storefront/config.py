"""Runtime settings for the storefront.

Settings are read from the environment once, at startup, into an immutable
``Settings`` object. ``configure()`` installs it; everything else reads it
through ``get_settings()``.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    currency: str = "INR"

    razorpay_key_id: str | None = None
    razorpay_key_secret: str = ""

    shiprocket_email: str | None = None
    shiprocket_password: str | None = None
    shiprocket_pickup_postcode: str = "400001"

    cloudinary_cloud_name: str | None = None
    cloudinary_api_key: str | None = None
    cloudinary_api_secret: str | None = None

    cors_origins: tuple[str, ...] = field(default=("*",))

    @property
    def has_razorpay_credentials(self) -> bool:
        return bool(self.razorpay_key_id and self.razorpay_key_secret)

    @property
    def has_shiprocket_credentials(self) -> bool:
        return bool(self.shiprocket_email and self.shiprocket_password)

    @property
    def has_cloudinary_credentials(self) -> bool:
        return bool(self.cloudinary_cloud_name and self.cloudinary_api_key and self.cloudinary_api_secret)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        origins = env.get("CORS_ORIGINS", "*")

        return cls(
            environment=env.get("STOREFRONT_ENV", "development").lower(),
            currency=env.get("CURRENCY", "INR"),
            razorpay_key_id=env.get("RAZORPAY_KEY_ID") or None,
            razorpay_key_secret=env.get("RAZORPAY_KEY_SECRET", ""),
            shiprocket_email=env.get("SHIPROCKET_EMAIL") or None,
            shiprocket_password=env.get("SHIPROCKET_PASSWORD") or None,
            shiprocket_pickup_postcode=env.get("SHIPROCKET_PICKUP_POSTCODE", "400001"),
            cloudinary_cloud_name=env.get("CLOUDINARY_CLOUD_NAME") or None,
            cloudinary_api_key=env.get("CLOUDINARY_API_KEY") or None,
            cloudinary_api_secret=env.get("CLOUDINARY_API_SECRET") or None,
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )


_current_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment on first use."""
    global _current_settings
    if _current_settings is None:
        _current_settings = Settings.from_env()
    return _current_settings


def configure(settings: Settings) -> None:
    """Install the settings built at startup."""
    global _current_settings
    _current_settings = settings


def reset_settings() -> None:
    """Forget installed settings (used by tests)."""
    global _current_settings
    _current_settings = None
