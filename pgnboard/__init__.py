"""Bitboard chess squares, pieces, positions and legal move generation, with ISO 8859-1 text."""

__version__ = "0.1.0"