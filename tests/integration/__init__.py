"""Integration tests.

Purpose
- Exercise real components together: the JSON file storage on a real
  filesystem and the application wiring built by bootstrap.

Guidelines
- Write only under tmp_path.
- Minimize mocking; prefer the real adapters.
"""
