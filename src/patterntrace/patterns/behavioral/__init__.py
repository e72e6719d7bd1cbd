"""Behavioral pattern demonstrations."""
