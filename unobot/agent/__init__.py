"""Agent interfaces."""
