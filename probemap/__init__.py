"""Quadratic-probing hash set, hash table and one-to-one bidirectional map."""

__version__ = "0.1.0"
__all__ = ["primes", "hashset", "hashtable", "bimap"]