"""Standard (versioned) data store service."""
