"""Violation records, calendar helpers and the generic list validator."""
