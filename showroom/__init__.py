"""Dealership dashboard back end: persistence, repositories and HTTP API."""
