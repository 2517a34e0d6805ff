"""Core layer: configuration, exceptions, interfaces and utilities."""
