"""Resource lookup commands."""
