"""Business logic: restructuring, the festival service facade and output formatting."""
