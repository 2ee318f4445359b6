"""Unit tests for the Either core algebra."""
