"""
Test Fixtures and Utilities

Shared fixtures for testing against the ledger without a network.

This module provides:
- An in-process fake ledger served over an httpx mock transport
- Sample ledger transactions

All test data is synthetic.
"""
