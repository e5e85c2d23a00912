"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- hashcontract exposes the record bases and the equals/digest pair
- hashcontract.api is the programmatic entrypoint for contract checks
- Module imports don't shadow function exports
"""

import types


def test_root_exports():
    import hashcontract

    for name in hashcontract.__all__:
        assert hasattr(hashcontract, name), f"hashcontract.{name} missing"


def test_api_exports_core_functions():
    from hashcontract.api import check_contract, digest, equals, objects_hash

    for func in (check_contract, digest, equals, objects_hash):
        assert isinstance(func, types.FunctionType)


def test_root_and_api_agree():
    import hashcontract
    import hashcontract.api

    assert hashcontract.digest is hashcontract.api.digest
    assert hashcontract.equals is hashcontract.api.equals
    assert hashcontract.check_contract is hashcontract.api.check_contract


def test_logging_module_does_not_shadow_stdlib():
    import logging
    import hashcontract.logging

    assert hashcontract.logging is not logging
    assert callable(logging.getLogger)
