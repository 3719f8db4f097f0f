"""Shared infrastructure: configuration, exceptions, logging."""
