"""Registry clients and parsers."""
