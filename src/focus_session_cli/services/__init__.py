"""Service layer for Focus Session CLI."""
