"""API integration package."""
