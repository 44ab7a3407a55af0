"""Feature modules: roster handling and player statistics."""
