"""Core infrastructure: data model, configuration, errors and logging."""
