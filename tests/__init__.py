"""
Test suite for the RepMove login and registration flows.

This package contains:
- ui/: Browser scenarios and page objects, run against a live app with ``-m ui``
- unit/: Offline tests for the page objects, config and environment helpers
"""
