"""
Phonebook search benchmark.

Compares linear search, bubble sort + jump search, quicksort + binary search
and hash table lookup over an in-memory phone directory.
"""

__version__ = "0.1.0"
