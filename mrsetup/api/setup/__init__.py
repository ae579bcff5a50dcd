"""End-to-end setup pipeline and usage guide."""
