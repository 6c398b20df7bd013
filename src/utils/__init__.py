"""Shared text and timestamp helpers."""
