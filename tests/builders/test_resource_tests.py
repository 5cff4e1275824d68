from __future__ import annotations

from tfx_verify.builders import build_resource_test
from tfx_verify.models import TestGroup, resource
from tfx_verify.models.report import deep_equal, is_not_false


def test_missing_module_only_reports_absence() -> None:
    group = build_resource_test(None, resource("test", "test.test"))

    assert group == TestGroup(
        describe="test",
        tests=(
            is_not_false(
                "Module None should contain resource test.test",
                False,
                "Expected None contain the test resource.",
            ),
        ),
    )


def test_missing_module_degrades_values_to_absent() -> None:
    group = build_resource_test(None, resource("test", "test.test", {"test_value": 3}))

    assert [leaf.args[0] for leaf in group.tests] == [False, False]


def test_resource_in_root_module() -> None:
    module = {
        "address": "root_module",
        "resources": [{"address": "test.test", "values": {"test_value": 3}}],
    }

    group = build_resource_test(module, resource("test", "test.test", {"test_value": 3}))

    assert group == TestGroup(
        describe="test",
        tests=(
            is_not_false(
                "Module root_module should contain resource test.test",
                True,
                "Expected root_module contain the test resource.",
            ),
            deep_equal(
                "test should have the correct test_value value",
                3,
                3,
                "Expected test.test to have correct value for test_value.",
            ),
        ),
    )


def test_resource_in_child_module_uses_composed_address() -> None:
    module = {
        "address": "module.test",
        "resources": [
            {"address": "different.resource"},
            {"address": "module.test.test.test", "values": {"test_value": 3}},
        ],
    }

    group = build_resource_test(module, resource("test", "test.test", {"test_value": 3}))

    assert group.tests[0].args[0] is True
    assert group.tests[1].args[:2] == (3, 3)


def test_bracketed_module_address_compared_verbatim() -> None:
    module = {
        "address": 'module.vsi["workload"]',
        "resources": [{"address": 'module.vsi["workload"].ibm_is_instance.vsi', "values": {}}],
    }

    group = build_resource_test(module, resource("Server", "ibm_is_instance.vsi"))

    assert group.tests[0].args[0] is True
