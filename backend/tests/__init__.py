"""
Test Suite

Unit, repository and API tests for the Job Board API. Fixtures live in
conftest.py.
"""
