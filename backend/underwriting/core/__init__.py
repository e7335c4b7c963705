"""Core settings, constants and logging."""
