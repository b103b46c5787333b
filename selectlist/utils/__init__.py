"""Utility helpers for selectlist: logging, paths and JSON settings."""
