"""Background jobs for the mentions service."""
