"""
dictanote - speech and text notes with LLM analysis.

Captures speech or imported text as timestamped notes, persists them
locally, and analyzes a note with an LLM, optionally against a project
specification document.
"""

__version__ = "0.1.0"
