"""Unit tests for eitherkit."""
