"""Presentation layer: web framework integration."""
