"""Core infrastructure: settings, logging, errors and the record store."""
