"""Pantry, shopping list and YouTube recipe backend."""
