"""Path and version value types for build-tool manifests."""

__version__ = "0.4.0"
