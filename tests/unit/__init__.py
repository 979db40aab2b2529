"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O (filesystem, network, clocks); use fakes at boundaries.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
