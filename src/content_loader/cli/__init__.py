"""Command-line interface for content_loader."""
