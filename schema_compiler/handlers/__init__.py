"""Keyword handlers for the primitive and refinement phases."""
