"""Pointer/keyboard state machine and hit-testing."""
