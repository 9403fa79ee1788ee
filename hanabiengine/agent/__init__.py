"""Agent protocol definitions."""
