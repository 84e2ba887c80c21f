"""Boggle-style word search, a base-36 string hash, an open-addressing hash table and MT19937."""

__version__ = "0.1.0"

__all__ = ["boggle", "hashing", "hashtable", "mt19937"]