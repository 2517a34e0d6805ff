"""Infrastructure layer: dependency injection and Redis services."""
