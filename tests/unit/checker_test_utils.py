"""Helpers for building module trees and verifying checker messages."""

import unittest.mock

import astroid


def module_with_classes(public: int = 0, private: int = 0, filename: str = "src/pkg/mod.py") -> astroid.nodes.Module:
    """Parse a module with `public` upper-case and `private` lower-case class declarations."""
    lines = [f"class Public{i}:\n    pass\n" for i in range(public)]
    lines += [f"class private{i}:\n    pass\n" for i in range(private)]
    tree = astroid.parse("\n".join(lines))
    tree.file = filename
    return tree


class CheckerTestCase:
    """Mixin for Checker tests."""

    def assertAddsMessage(self, checker, msg_id, node=None, args=None):
        """Verify that checker.add_message was called."""
        # We assert on the linter mock
        calls = checker.linter.add_message.call_args_list
        found = False

        for call in calls:
            c_args, c_kwargs = call

            # MSG ID (Pos 0)
            if not (len(c_args) > 0 and c_args[0] == msg_id):
                continue

            # Node (Pos 2 or Kwarg 'node')
            actual_node = None
            if len(c_args) > 2:
                actual_node = c_args[2]
            elif "node" in c_kwargs:
                actual_node = c_kwargs["node"]
            if node is not None and actual_node is not node:
                continue

            # Args (Pos 3 or Kwarg 'args')
            actual_args = None
            if len(c_args) > 3:
                actual_args = c_args[3]
            elif "args" in c_kwargs:
                actual_args = c_kwargs["args"]
            if args is not None and args != unittest.mock.ANY and actual_args != args:
                continue

            found = True
            break

        if not found:
            raise AssertionError(f"Message {msg_id} not found in calls: {calls}")

    def assertNoMessages(self, checker):
        calls = checker.linter.add_message.call_args_list
        if calls:
            raise AssertionError(f"Expected no messages, but found: {calls}")
        checker.linter.add_message.assert_not_called()

    def messages_with_id(self, checker, msg_id):
        return [c for c in checker.linter.add_message.call_args_list if c[0] and c[0][0] == msg_id]
