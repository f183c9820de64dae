"""Embedded events and guests store mirrored to a single JSON document."""
