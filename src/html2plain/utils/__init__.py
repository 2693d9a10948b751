"""Shared helpers: typed errors, logging and span replacement."""
