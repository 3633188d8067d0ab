"""Shared helpers for devs-scaffold."""
