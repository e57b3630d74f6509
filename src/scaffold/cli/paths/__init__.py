"""Include path commands."""
