"""Crate request models and token parsing."""
