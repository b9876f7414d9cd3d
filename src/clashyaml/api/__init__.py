"""REST API exposing the highlighter and validator."""
