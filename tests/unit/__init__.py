"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Domain tests need no fixtures: every domain operation is a pure function.
- Logging tests write only under pytest's tmp_path.
"""
