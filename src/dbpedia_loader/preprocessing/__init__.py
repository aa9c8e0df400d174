"""
Dump preprocessing: line parsing and streaming decompression.
"""
from .ttl_line import next_field, parse_line
from .ttl_loader import LineSource, Bz2LineSource, TtlLoader

__all__ = [
    "next_field",
    "parse_line",
    "LineSource",
    "Bz2LineSource",
    "TtlLoader",
]
