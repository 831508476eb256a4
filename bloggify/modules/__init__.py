"""Feature modules for Bloggify Utils."""
