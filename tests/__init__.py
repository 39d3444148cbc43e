"""Test suite for fixwidth."""
