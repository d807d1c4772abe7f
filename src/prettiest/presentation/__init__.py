"""Presentation layer: host-facing API."""
