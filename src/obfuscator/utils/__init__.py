"""Shared helpers: exceptions, symbol tables and logging."""
