"""Gesture handling services."""
