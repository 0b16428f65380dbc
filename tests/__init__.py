"""
Test Suite for Pondo

Test coverage for the ledger client engine and its local state.

Test Structure:
- fixtures/: Fake ledger and shared test data
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI workflow tests

Test Categories:
- Core utilities (currency, models, store, entities)
- Budget and goal analysis
- Ledger client, cache, forms and sync
- Authentication session
- Views and the savings contribution flow

Test Data:
All test data is synthetic. No test talks to a real ledger.
"""
