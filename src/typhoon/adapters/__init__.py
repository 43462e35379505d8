"""Adapters – transport integrations built on the retry service."""
