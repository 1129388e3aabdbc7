"""Terminal dashboard (optional ``tui`` extra)."""
