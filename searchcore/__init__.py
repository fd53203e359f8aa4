"""Building blocks for typo-tolerant search: distances, automatons, query enhancement and ranking."""

__version__ = "0.1.0"