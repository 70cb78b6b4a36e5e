"""confsearch - search a Confluence wiki from the terminal."""

__version__ = "1.0.0"
