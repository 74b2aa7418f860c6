"""
Shared service utilities.

- http.py - requests session with default timeout (no retries)
"""
