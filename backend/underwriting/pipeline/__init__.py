"""Validation pipeline — rule steps, engine and per-family rule sets."""
