"""Task management view models and validation."""
