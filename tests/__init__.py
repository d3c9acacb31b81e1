#!/usr/bin/env python3
"""
Test suite for SkillBridge.

All tests run without external services:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest (unittest.TestCase modules only)
    python -m unittest discover tests -v

Redis is always mocked; the session cache tests run against the in-memory
store.
"""
