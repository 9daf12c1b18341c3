"""Tool sub-servers."""
