"""Room availability, seasonal pricing and booking lifecycle backend."""

__version__ = "1.0.0"
