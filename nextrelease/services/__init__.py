"""Services combining the GitHub layer with the progression engine."""
