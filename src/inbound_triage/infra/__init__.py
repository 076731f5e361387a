"""Implementações de IO: tradução externa e sinks."""
