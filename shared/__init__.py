"""Helpers shared by the UI suite: environment validation, secrets and logging."""
