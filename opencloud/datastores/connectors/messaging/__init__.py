"""Cross-server messaging service."""
