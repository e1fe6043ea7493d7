"""Terminal display."""
