"""Prompt templates for note enrichment.

- note_summary: 1-2 sentence summary of a note
- note_tags: 3-5 comma-separated keyword tags
"""

from ainotes.ai.prompts import note_summary, note_tags

__all__ = ["note_summary", "note_tags"]
