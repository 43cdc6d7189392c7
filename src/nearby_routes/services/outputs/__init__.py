"""Serializers for route results."""
