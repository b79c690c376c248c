"""Unit tests for NamingConventionChecker (C94xx)."""

import unittest
from unittest.mock import MagicMock

import astroid

from naming_linter.domain.config import ConfigurationLoader
from naming_linter.domain.constants import NodeKind
from naming_linter.domain.entities import EnumDeclaration, EnumMember, InterfaceDeclaration
from naming_linter.infrastructure.gateways.astroid_gateway import AstroidNamingGateway
from naming_linter.infrastructure.services.rule_registry import RuleRegistryService
from naming_linter.use_cases.checks.naming import NamingConventionChecker
from tests.linter_test_utils import MODULE_PATH, MockLinter, run_checker
from tests.unit.checker_test_utils import CheckerTestCase, create_mock_node

REGISTRY = RuleRegistryService().get_registry()


def _checker_kwargs(config_loader: ConfigurationLoader | None = None) -> dict[str, object]:
    return {
        "gateway": AstroidNamingGateway(),
        "config_loader": config_loader or ConfigurationLoader({}, {}),
        "registry": REGISTRY,
    }


class TestNamingCheckerMessages(unittest.TestCase):
    """Checker wiring: msgs built from the registry."""

    def test_msgs_cover_all_codes(self) -> None:
        checker = NamingConventionChecker(MockLinter(), **_checker_kwargs())
        self.assertEqual(len(checker.msgs), 16)
        template, symbol, _ = checker.msgs["C9414"]
        self.assertEqual(template, "Interface name '%s' is too generic.")
        self.assertEqual(symbol, "interface-no-too-generic")

    def test_msgids_share_checker_id(self) -> None:
        checker = NamingConventionChecker(MockLinter(), **_checker_kwargs())
        self.assertEqual({code[1:3] for code in checker.msgs}, {"94"})


class TestNamingCheckerWithMockGateway(unittest.TestCase, CheckerTestCase):
    """visit_classdef dispatches gateway output to the rules."""

    def setUp(self) -> None:
        self.linter = MagicMock()
        self.gateway = MagicMock()
        self.checker = NamingConventionChecker(
            self.linter,
            gateway=self.gateway,
            config_loader=ConfigurationLoader({}, {}),
            registry=REGISTRY,
        )

    def test_enum_declaration_reports_suffix(self) -> None:
        node = create_mock_node(astroid.nodes.ClassDef)
        member_node = create_mock_node(astroid.nodes.AssignName)
        self.gateway.nodes_for_class.return_value = [
            (NodeKind.ENUM_DECLARATION, EnumDeclaration(
                name="ColorEnum",
                members=(EnumMember(name="red", node=member_node),),
                node=node,
            )),
        ]

        self.checker.visit_classdef(node)

        self.assertAddsMessage(self.checker, "C9403", node=node, args=())
        self.assertAddsMessage(self.checker, "C9404", node=member_node)
        self.assertAddsMessage(self.checker, "C9405", node=member_node)

    def test_generic_interface_passes_name_arg(self) -> None:
        node = create_mock_node(astroid.nodes.ClassDef)
        self.gateway.nodes_for_class.return_value = [
            (NodeKind.INTERFACE_DECLARATION, InterfaceDeclaration(name="Config", node=node)),
        ]

        self.checker.visit_classdef(node)

        self.assertAddsMessage(self.checker, "C9414", node=node, args=("Config",))

    def test_clean_class_adds_no_message(self) -> None:
        node = create_mock_node(astroid.nodes.ClassDef)
        self.gateway.nodes_for_class.return_value = []

        self.checker.visit_classdef(node)

        self.assertNoMessages(self.checker)

    def test_excluded_path_is_skipped(self) -> None:
        checker = NamingConventionChecker(
            self.linter,
            gateway=self.gateway,
            config_loader=ConfigurationLoader({"exclude_paths": ["mock_module"]}, {}),
            registry=REGISTRY,
        )
        node = create_mock_node(astroid.nodes.ClassDef)

        checker.visit_classdef(node)

        self.gateway.nodes_for_class.assert_not_called()
        self.assertNoMessages(checker)

    def test_unregistered_message_is_not_reported(self) -> None:
        checker = NamingConventionChecker(
            self.linter, gateway=self.gateway,
            config_loader=ConfigurationLoader({}, {}), registry={},
        )
        node = create_mock_node(astroid.nodes.ClassDef)
        self.gateway.nodes_for_class.return_value = [
            (NodeKind.INTERFACE_DECLARATION, InterfaceDeclaration(name="Data", node=node)),
        ]

        checker.visit_classdef(node)

        self.assertNoMessages(checker)


class TestNamingCheckerEndToEnd(unittest.TestCase):
    """Real astroid trees walked like pylint does."""

    def test_enum_example(self) -> None:
        code = """
        from enum import Enum

        class OrderState(Enum):
            PENDING = "pending"
            ACTIVE = "active"

        class UserTypes(Enum):
            ADMIN = 1
            guest = 2
        """
        msgs = run_checker(NamingConventionChecker, code, **_checker_kwargs())
        self.assertEqual(msgs, ["C9402", "C9401", "C9404", "C9405"])

    def test_protocol_example(self) -> None:
        code = """
        from typing import Protocol

        class IUserProfile(Protocol):
            Name: str

        class HTTPClientConfig(Protocol):
            isEnabled: bool
            item: list[str]
        """
        linter = MockLinter()
        run_checker(NamingConventionChecker, code, linter=linter, **_checker_kwargs())
        self.assertEqual(
            linter.messages,
            ["C9412", "C9413", "C9421", "C9423", "C9413", "C9425"],
        )
        self.assertEqual(linter.calls[2][2], ("Name",))
        self.assertEqual(linter.calls[5][2], ("item",))

    def test_typed_dict_snake_case_fields(self) -> None:
        code = """
        from typing import TypedDict

        class UserRow(TypedDict):
            user_name: str
            active: bool
        """
        msgs = run_checker(NamingConventionChecker, code, **_checker_kwargs())
        self.assertEqual(msgs, ["C9421", "C9422", "C9424"])

    def test_plain_classes_are_ignored(self) -> None:
        code = """
        class settings_holder:
            Value: bool = True
        """
        self.assertEqual(run_checker(NamingConventionChecker, code, **_checker_kwargs()), [])

    def test_repeated_runs_are_identical(self) -> None:
        code = """
        from typing import Protocol

        class Data(Protocol):
            user_name: str
        """
        first = run_checker(NamingConventionChecker, code, **_checker_kwargs())
        second = run_checker(NamingConventionChecker, code, **_checker_kwargs())
        self.assertEqual(first, second)
        self.assertEqual(first, ["C9414", "C9421", "C9422"])

    def test_excluded_module_reports_nothing(self) -> None:
        code = """
        from typing import Protocol

        class Data(Protocol):
            user_name: str
        """
        config_loader = ConfigurationLoader({"exclude_paths": [MODULE_PATH]}, {})
        self.assertEqual(
            run_checker(NamingConventionChecker, code, **_checker_kwargs(config_loader)), [])
