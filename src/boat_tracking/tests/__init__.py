"""Test suite for the boat tracking system."""
