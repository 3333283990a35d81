"""ZYCLE recycling management API."""
