"""Contracts the application expects from its external collaborators."""
