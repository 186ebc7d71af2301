"""Test suite for secretport.

- unit/: Unit tests - contract behavior with recording fakes, HTTP client
  behavior with pytest-httpx. No real network access.
"""
