"""Infrastructure adapters (bcrypt hashing, structlog logging)."""
