"""Command-line interface for StudyBook."""
