"""Core building blocks: result types, error codes, errors, settings, container."""
