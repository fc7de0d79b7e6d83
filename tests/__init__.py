"""Tests for polyc."""
