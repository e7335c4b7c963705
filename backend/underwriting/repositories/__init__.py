"""Repositories — async data access, one module per table."""
