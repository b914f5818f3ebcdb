# shecomp Test Suite
"""
Test suite including:
- Unit tests (codec, framing, padding, compression)
- Integration tests (public API, event logging)
- Security tests (length limit, malformed input)
- CLI tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
