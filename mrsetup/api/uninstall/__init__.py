"""Removal of the service, binary, CLI plugin and logs."""
