"""Domain helpers: record payloads and their JSON representation."""
