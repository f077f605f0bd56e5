"""Kernel – errors and security ports shared by every layer."""
