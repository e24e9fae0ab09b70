"""Infrastructure adapters: persistence and blob storage."""
