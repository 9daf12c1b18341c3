"""Result models."""
