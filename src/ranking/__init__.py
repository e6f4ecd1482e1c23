"""Offline dependency-frequency ranking of the crates.io index."""
