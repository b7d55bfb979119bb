"""Command modules for the fintrack CLI."""
