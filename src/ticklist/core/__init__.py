"""Ports and application state."""
