"""Shared helpers: configuration, credentials and enumerated domains."""
