"""Configuration storage."""
