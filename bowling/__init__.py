"""Scores a single game of ten-pin bowling."""
