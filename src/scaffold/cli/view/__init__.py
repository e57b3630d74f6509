"""View commands."""
