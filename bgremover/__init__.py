"""Temporary image hosting backend used by the background remover client."""
