"""Submission Gate — canonical payloads for the Policy Repository."""
