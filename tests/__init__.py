"""Test suite for jsontree."""
