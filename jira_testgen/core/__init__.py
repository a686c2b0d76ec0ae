"""Core domain: extraction, grouping, stories and the backend client."""
