"""Infrastructure layer: file store and template loading."""
