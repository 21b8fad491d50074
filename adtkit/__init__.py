"""Sets, hash tables, deques, a chunked list and a priority queue, with word, sorting and Huffman tools."""

__version__ = "0.1.0"