"""
Utilities Module - shared constants, colours and helpers
"""
