"""Open Source Finder: a directory of open-source alternatives to proprietary software."""

__version__ = "0.1.0"
