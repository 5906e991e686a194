"""Utility modules for session tracking."""
from .load_history import LoadHistory, LoadSummary
