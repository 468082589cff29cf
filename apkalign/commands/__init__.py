"""CLI commands for apkalign."""
