# ClassiCrypt Test Suite
"""
Test suite including:
- Unit tests (codec, modular arithmetic, ciphers, RSA)
- Integration tests (service layer, audit log, command line)
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
