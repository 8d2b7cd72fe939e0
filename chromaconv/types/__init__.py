"""Shared type aliases and formatting tables."""
