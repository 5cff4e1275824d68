from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tfx_verify import OptionsError, VerificationOptions, VerificationService, resource
from tfx_verify.config import ManifestLoader
from tfx_verify.models import AssertionKind, TestGroup, evaluate

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def _load(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def test_options_require_tf_data() -> None:
    with pytest.raises(OptionsError) as excinfo:
        VerificationService().verify({"module_name": "x", "address": "root_module"})

    assert str(excinfo.value) == (
        "options must be passed with key ['tf_data'] got ['address', 'module_name']"
    )


def test_plan_verification_unwraps_planned_values() -> None:
    group = VerificationService().verify(
        {
            "tf_data": _load("plan-modules.json"),
            "module_name": "Landing Zone",
            "address": "module.landing_zone",
            "test_list": [
                resource("VPC", "ibm_is_vpc.vpc", {"name": "ut-vpc", "classic_access": False}),
                {"name": "Resource Group", "address": "data.ibm_resource_group.group"},
            ],
        }
    )

    assert group.describe == "Module Landing Zone"
    assert [node.describe for node in group.tests if isinstance(node, TestGroup)] == [
        "VPC",
        "Resource Group",
    ]
    assert all(leaf.args[0] == leaf.args[1] for leaf in group.iter_leaves()
               if leaf.kind is AssertionKind.DEEP_EQUAL)
    assert all(leaf.args[0] for leaf in group.iter_leaves()
               if leaf.kind is not AssertionKind.DEEP_EQUAL)


def test_plan_verification_with_predicate() -> None:
    options = VerificationOptions(
        tf_data=_load("plan-modules.json"),
        module_name="Root",
        address="root_module",
        test_list=[
            resource(
                "Pet",
                "random_pet.root",
                {"length": evaluate("to be at least two", lambda value: value >= 2)},
            )
        ],
    )

    group = VerificationService().verify(options)

    predicate_leaf = group.tests[1].tests[1]
    assert predicate_leaf.kind is AssertionKind.IS_TRUE
    assert predicate_leaf.args == (True, "Expected random_pet.root length to be at least two")


def test_apply_verification_accepts_mappings() -> None:
    group = VerificationService().verify(
        {
            "tf_data": _load("state-landing-zone.json"),
            "module_name": "External",
            "is_apply": True,
            "test_list": [
                {"address": "data.external.example", "instances": [{"id": "-"}]},
            ],
        }
    )

    assert group.describe == "External"
    instance_group = group.tests[0]
    assert instance_group.describe == "data.external.example"
    assert [leaf.args[0] for leaf in instance_group.tests[:2]] == [True, True]
    assert instance_group.tests[2].args[:2] == ("-", "-")


def test_verify_manifest_builds_one_group_per_section() -> None:
    manifest = ManifestLoader().load(FIXTURES / "manifest.yaml")
    service = VerificationService()

    plan_only = service.verify_manifest(manifest, plan=_load("plan-modules.json"))
    both = service.verify_manifest(
        manifest, plan=_load("plan-modules.json"), state=_load("state-landing-zone.json")
    )

    assert [group.describe for group in plan_only] == [
        "Module Landing Zone",
        "Module Workload Servers",
    ]
    assert [group.describe for group in both][-1] == "Landing Zone"
    assert service.verify_manifest(manifest) == []


def test_manifest_fixture_passes_against_fixtures() -> None:
    manifest = ManifestLoader().load(FIXTURES / "manifest.yaml")

    groups = VerificationService().verify_manifest(
        manifest, plan=_load("plan-modules.json"), state=_load("state-landing-zone.json")
    )

    for group in groups:
        for leaf in group.iter_leaves():
            if leaf.kind is AssertionKind.DEEP_EQUAL:
                assert leaf.args[0] == leaf.args[1], leaf.name
            else:
                assert leaf.args[0], leaf.name
