"""
Shared pytest configuration for the UI suite.

Browser fixtures live in ``tests/ui/conftest.py``; this module only holds
run-level wiring that applies to every test directory.
"""

import pytest

from config import worker_count


@pytest.hookimpl(optionalhook=True)
def pytest_xdist_auto_num_workers(config):
    """
    Size the ``-n auto`` worker pool.

    Each worker drives its own browser, so CI runners get fewer of them.
    """
    return worker_count()
