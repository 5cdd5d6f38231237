"""
Test suite for FinClient core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
