"""Shared response schemas."""
