"""AINotes REST API package.

Sub-modules expose FastAPI routers:
- notes: create/update notes with AI enrichment, related notes
- admin: tag backfill and sample-note seeding
"""
