"""Thin PyQt5 presentation layer over the selectable-list store."""
