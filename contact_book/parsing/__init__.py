"""Command line parsing: raw text → Command"""
from .parser import parse, tokenize

__all__ = ["parse", "tokenize"]
