"""Core interfaces package."""
