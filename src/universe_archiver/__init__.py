"""Universe Archiver: crawl, cache and export the story catalog."""

__version__ = "0.1.0"
