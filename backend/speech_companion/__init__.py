"""Speech therapy companion API for parents."""

__version__ = "0.1.0"
