"""Persistence and scratch storage."""
