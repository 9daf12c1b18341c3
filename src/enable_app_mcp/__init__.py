"""Drag-and-drop quarantine removal for macOS app bundles, served over MCP."""
