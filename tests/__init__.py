"""
Test suite for the numeric text converter

Contains:
- tests/unit/          : Unit tests for options, decomposition, converter, contracts, logging
"""
