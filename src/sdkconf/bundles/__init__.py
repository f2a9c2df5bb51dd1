"""Installed SDK bundles."""

from .discovery import SDKBundle, SDKVariant, discover_valid_bundles, load_bundle, select_destination

__all__ = ["SDKBundle", "SDKVariant", "discover_valid_bundles", "load_bundle", "select_destination"]
