"""Ordered (numeric, sortable) data store service."""
