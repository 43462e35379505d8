"""Kernel – error hierarchy and time ports shared by every layer."""
