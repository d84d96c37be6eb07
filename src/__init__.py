"""Quantity measurement library: length and weight quantities."""
