"""One-shot administrative commands."""
