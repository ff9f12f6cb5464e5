"""Serve Deployment Replica Selection Package."""

__version__ = "1.0.0"
__description__ = (
    "Filter and pagination state engine for the Serve deployment replicas page"
)

__all__ = ["core", "pages"]
