"""Builders that turn expectations and Terraform data into assertion trees."""

from .module_tests import build_module_test
from .resource_tests import build_resource_test, find_module_resource
from .state_tests import build_instance_test, build_state_test, find_instance

__all__ = [
    "build_instance_test",
    "build_module_test",
    "build_resource_test",
    "build_state_test",
    "find_instance",
    "find_module_resource",
]
