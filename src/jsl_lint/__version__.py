"""Version information for jsl-lint."""
__version__ = "0.3.0"
