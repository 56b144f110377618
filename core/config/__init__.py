"""Configuration for the core app."""
