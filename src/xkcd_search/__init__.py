"""xkcd-search: keyword search over xkcd comic metadata with a local cache."""

__version__ = "0.1.0"
