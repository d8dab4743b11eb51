"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- verirun root exposes the API functions and result models
- verirun.kernel exposes the pure functions
- Importing the package does not configure logging
"""

import logging


def test_root_exports():
    import verirun

    for name in verirun.__all__:
        assert hasattr(verirun, name), name
    assert callable(verirun.find_rule_hits)
    assert callable(verirun.extract_answer)


def test_kernel_exports():
    from verirun import kernel

    for name in kernel.__all__:
        assert hasattr(kernel, name), name


def test_api_and_kernel_share_error_types():
    from verirun import InvalidUrlError
    from verirun.kernel.locator import InvalidUrlError as KernelInvalidUrlError

    assert InvalidUrlError is KernelInvalidUrlError


def test_import_adds_no_log_handlers():
    import verirun  # noqa: F401

    assert not logging.getLogger("verirun").handlers
