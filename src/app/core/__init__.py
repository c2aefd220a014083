"""Core infrastructure: configuration, errors, middleware, lifecycle."""
