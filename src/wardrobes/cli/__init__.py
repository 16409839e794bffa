"""Command-line interface for wardrobe cut lists."""
