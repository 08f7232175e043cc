"""Application layer for energy calculations."""
