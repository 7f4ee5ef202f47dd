"""
Test suite for fpcourse

Contains:
- tests/unit/          : Unit tests for core types, functional primitives,
                         lessons, the interactive session and the CLI
"""
