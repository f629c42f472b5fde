"""Storage configuration resolution layer.

This module turns raw storage entries into an immutable registry of
per-database paths and engine options consumed when databases open.
"""
