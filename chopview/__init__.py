"""Grapheme-aware string views, chopping, number scanning and token extraction."""
