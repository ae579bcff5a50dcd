"""Service log access."""
