"""Time tracking core: sessions, derived amounts and persisted state."""
