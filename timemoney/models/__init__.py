"""Pydantic models for the persisted app state."""
