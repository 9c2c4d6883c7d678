"""Validation-only notification HTTP service."""
