"""Data models for Focus Session CLI."""
