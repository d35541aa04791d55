"""PNG salary and wages tax calculation service."""

__version__ = "0.1.0"
