"""Application layer: services orchestrating the domain for callers."""
