"""micro-obs: item and order services sharing a Redis-backed catalog."""

__version__ = "0.1.0"
