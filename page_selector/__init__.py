"""Bounded page-selector control with virtual overflow groups."""
