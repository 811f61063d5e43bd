"""Tests for OLCodec module."""
