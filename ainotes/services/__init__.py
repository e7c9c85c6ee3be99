"""Domain services: enrichment, similarity ranking and batch workflows."""
