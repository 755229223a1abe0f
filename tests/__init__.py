"""Test suite for Zoo Keeper.

Test structure:
- unit/: Unit tests - domain logic, handlers, config and logging in isolation
"""
