"""Find where a string is used and who owns those files."""

__version__ = "0.1.0"
