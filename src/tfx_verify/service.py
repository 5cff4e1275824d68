"""Orchestration layer used by callers and the CLI to build verification trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union

from .adapters import plan_values
from .builders import build_module_test, build_state_test
from .comparison import ValueComparator
from .config import Manifest
from .models import ExpectedResource, ExpectedState, TestGroup, TestNode
from .models.expectation import as_instance, to_expectations

logger = logging.getLogger(__name__)


class OptionsError(RuntimeError):
    """Raised when verification options are missing required keys."""


@dataclass(slots=True)
class VerificationOptions:
    """Inputs of a single verification run."""

    tf_data: Mapping[str, Any]
    module_name: str = ""
    address: str = ""
    is_apply: bool = False
    test_list: Sequence[Union[ExpectedResource, ExpectedState]] = field(default_factory=list)


def parse_options(options: Union[VerificationOptions, Mapping[str, Any]]) -> VerificationOptions:
    """Return :class:`VerificationOptions`, filling defaults for omitted keys."""

    if isinstance(options, VerificationOptions):
        return options

    if "tf_data" not in options:
        raise OptionsError(f"options must be passed with key ['tf_data'] got {sorted(options)}")

    return VerificationOptions(
        tf_data=options["tf_data"],
        module_name=options.get("module_name", ""),
        address=options.get("address", ""),
        is_apply=bool(options.get("is_apply", False)),
        test_list=list(options.get("test_list", [])),
    )


def _as_expected_resource(item: Any) -> ExpectedResource:
    if isinstance(item, ExpectedResource):
        return item
    return ExpectedResource(
        name=item["name"], address=item["address"], values=to_expectations(item.get("values"))
    )


def _as_expected_state(item: Any) -> ExpectedState:
    if isinstance(item, ExpectedState):
        return item
    return ExpectedState(
        name=item.get("name") or item["address"],
        address=item["address"],
        instances=tuple(as_instance(entry) for entry in item.get("instances", [])),
    )


class VerificationService:
    """High level entry point turning Terraform data and expectations into tests."""

    def __init__(self, *, comparator: ValueComparator | None = None) -> None:
        self._comparator = comparator or ValueComparator()

    # ------------------------------------------------------------------
    def verify(self, options: Union[VerificationOptions, Mapping[str, Any]]) -> TestGroup:
        """Build the plan (default) or apply test group described by ``options``."""

        parsed = parse_options(options)

        if parsed.is_apply:
            specs = [_as_expected_state(item) for item in parsed.test_list]
            logger.info(
                "Building state tests for %s (%d resources)", parsed.module_name, len(specs)
            )
            return build_state_test(
                parsed.module_name, parsed.tf_data, specs, comparator=self._comparator
            )

        specs = [_as_expected_resource(item) for item in parsed.test_list]
        logger.info("Building plan tests for module %s (%d resources)", parsed.address, len(specs))
        return build_module_test(
            parsed.module_name,
            parsed.address,
            plan_values(parsed.tf_data),
            specs,
            comparator=self._comparator,
        )

    # ------------------------------------------------------------------
    def verify_manifest(
        self,
        manifest: Manifest,
        *,
        plan: Optional[Mapping[str, Any]] = None,
        state: Optional[Mapping[str, Any]] = None,
    ) -> List[TestNode]:
        """Build one group per manifest section that has matching data."""

        groups: List[TestNode] = []
        if plan is not None:
            for module in manifest.plan:
                groups.append(
                    self.verify(
                        VerificationOptions(
                            tf_data=plan,
                            module_name=module.name,
                            address=module.address,
                            test_list=module.resources,
                        )
                    )
                )
        if state is not None:
            for group in manifest.state:
                groups.append(
                    self.verify(
                        VerificationOptions(
                            tf_data=state,
                            module_name=group.name,
                            is_apply=True,
                            test_list=group.resources,
                        )
                    )
                )
        return groups


__all__ = ["OptionsError", "VerificationOptions", "VerificationService", "parse_options"]
