"""Bundled element reference table (weight, symbol, name per line)."""
