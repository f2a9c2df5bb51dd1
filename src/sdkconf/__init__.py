"""sdkconf: per-target override configuration for installed SDK bundles."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["get_version"]

DISTRIBUTION = "sdkconf"


def get_version() -> str:
    """Version of the installed distribution, ``0.0.0`` when running from a checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
