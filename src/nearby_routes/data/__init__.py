"""Roster data access."""
