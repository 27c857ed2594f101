"""reflectctl: markdown review journal toolkit."""

__version__ = "0.1.0"
