"""Schools API."""
