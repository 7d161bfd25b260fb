"""Shared utilities for FootyHub."""
