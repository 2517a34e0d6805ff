"""Infrastructure services package."""
