"""AINotes: AI-enriched notes with related-note search."""

__version__ = "0.1.0"
