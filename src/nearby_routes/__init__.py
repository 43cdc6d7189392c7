"""Nearby consumer route planning service."""
