"""HTTP request layer."""
