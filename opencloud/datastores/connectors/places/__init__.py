"""Place management service."""
