"""REST API for wardrobe cut lists."""
