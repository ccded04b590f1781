"""Encoding utilities."""
