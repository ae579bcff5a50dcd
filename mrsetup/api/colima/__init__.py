"""Colima container runtime."""
