"""STOPS project homepage service."""
