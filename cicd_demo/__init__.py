"""ci-cd-demo status server."""

__version__ = "0.1.0"
