"""CLI module for objectstore."""
