"""Docker-backed commands."""
