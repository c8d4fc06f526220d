"""Person records HTTP service."""
