"""Specification document reading for context-aware analysis."""

from dictanote.core.spec_reader.reader import SpecReader, validate_spec_path

__all__ = ["SpecReader", "validate_spec_path"]
