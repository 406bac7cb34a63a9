"""Business logic services package."""

from .statistics import get_summary

__all__ = ["get_summary"]
