"""Core infrastructure: settings, logging, errors, locking and IDs."""
