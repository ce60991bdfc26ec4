"""Tests - Test suite and shared test vectors."""
