"""Theme and style sheet."""
