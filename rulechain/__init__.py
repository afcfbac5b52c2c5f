"""Ordered categorization rules and their application to entries."""
