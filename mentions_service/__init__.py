"""Mentions service Django project."""
