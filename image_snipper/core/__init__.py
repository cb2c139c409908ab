"""Core infrastructure: settings, errors, cancellation and utilities."""
