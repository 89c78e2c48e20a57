"""Viewport transform, bar geometry and frame painting."""
