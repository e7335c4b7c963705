"""Database layer — ORM models and session builders."""
