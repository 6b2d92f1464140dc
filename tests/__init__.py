"""Timekit Test Suite

Test organization:
- unit/client/: Config, request building, transport, endpoint calls, CLI
- integration/: Live checks against a running Timekit API (marker: live)

Run all tests:
    pytest tests/

Skip live checks explicitly:
    pytest tests/ -m "not live"
"""
