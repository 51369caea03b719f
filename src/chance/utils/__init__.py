"""Shared helpers: error taxonomy and logging set-up."""
