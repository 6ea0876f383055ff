"""Tests for decorated exceptions."""

import logging
from pathlib import Path

import pytest

from corner.core.decoration import (
    Corner,
    CornerError,
    get_stack_provider,
    set_stack_provider,
)
from corner.core.registry import VARIANTS, DecorationRegistry
from corner.core.stack_capture import StaticStackProvider
from corner.interfaces.corner import CornerInterface
from corner.models.frame import StackFrame
from corner.models.snippet import Decoration
from corner.utils.errors import InvalidArgumentError

SUPPORT_LINK = "https://github.com/Sura-laboratory/corner"
MARKER = "15f3456a04616adc5b42f3533d41a43aa2bad7eee2e914684ec86c3b84b71c61"
SUBCALL_MARKER = "6115f3456a04616adc5b42f3533d41a43aa2bad7eee2e914684ec86c3b84b71c"


class FooException(
    Corner,
    helpful_message="This is an example of the Exception class",
    support_link=SUPPORT_LINK,
):
    """Example decorated exception."""


class FooError(
    CornerError,
    helpful_message="This is an example of the Error class",
    support_link=SUPPORT_LINK,
):
    """Example decorated runtime error."""


def _library_a_error() -> type[Corner]:
    class NotFound(
        Corner,
        helpful_message="Library A: record missing",
        support_link="https://a.example/nf",
    ):
        pass

    return NotFound


def _library_b_error() -> type[Corner]:
    class NotFound(
        CornerError,
        helpful_message="Library B: page missing",
        support_link="https://b.example/nf",
    ):
        pass

    return NotFound


class TestDecoration:
    """Test message, helpful message and support link."""

    def test_exception(self) -> None:
        with pytest.raises(Corner) as exc_info:
            raise FooException("test")

        ex = exc_info.value
        assert ex.get_message() == "test"
        assert ex.get_helpful_message()
        assert ex.get_support_link() == SUPPORT_LINK

    def test_error(self) -> None:
        with pytest.raises(Corner) as exc_info:
            raise FooError("test")

        ex = exc_info.value
        assert isinstance(ex, RuntimeError)
        assert ex.get_message() == "test"
        assert ex.get_helpful_message() == "This is an example of the Error class"
        assert ex.get_support_link() == SUPPORT_LINK

    def test_message_defaults_to_empty(self) -> None:
        assert FooException().get_message() == ""

    def test_message_is_str_of_first_argument(self) -> None:
        assert FooException(404, "extra").get_message() == "404"

    def test_properties_match_getters(self) -> None:
        ex = FooException("test")

        assert ex.helpful_message == ex.get_helpful_message()
        assert ex.support_link == ex.get_support_link()

    def test_decoration_identical_across_instances(self) -> None:
        """Test every instance of a variant carries the same decoration."""
        first, second = FooException("a"), FooException("b")

        assert first.get_helpful_message() == second.get_helpful_message()
        assert first.get_support_link() == second.get_support_link()

    def test_satisfies_corner_interface(self) -> None:
        assert isinstance(FooException("test"), CornerInterface)
        assert isinstance(FooError("test"), CornerInterface)

    def test_combines_with_builtin_bases(self) -> None:
        """Test the capability attaches to other exception bases."""

        class DiskFull(
            Corner,
            OSError,
            helpful_message="The disk is full; free some space and retry.",
            support_link="https://example.com/help/disk",
        ):
            pass

        with pytest.raises(OSError) as exc_info:
            raise DiskFull(28, "No space left on device")

        ex = exc_info.value
        assert isinstance(ex, Corner)
        assert ex.errno == 28
        assert ex.get_helpful_message() == "The disk is full; free some space and retry."

    def test_unregistered_variant_uses_default(self) -> None:
        """Test construction never fails for an unregistered variant."""

        class Unregistered(Corner):
            pass

        ex = Unregistered("test")

        assert ex.get_helpful_message() == VARIANTS.default.helpful_message
        assert ex.get_support_link() == VARIANTS.default.support_link

    def test_unregistered_variant_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test falling back to the default decoration is not a warning."""
        with caplog.at_level(logging.DEBUG, logger="corner"):
            CornerError("x")
            Corner("y")

        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []

    def test_same_named_classes_keep_their_decorations(self) -> None:
        """Test classes sharing a name in different scopes don't overwrite each other."""
        first = _library_a_error()
        second = _library_b_error()

        a = first("record 7")
        b = second("/missing")

        assert first.__name__ == second.__name__ == "NotFound"
        assert a.get_helpful_message() == "Library A: record missing"
        assert a.get_support_link() == "https://a.example/nf"
        assert b.get_helpful_message() == "Library B: page missing"
        assert b.get_support_link() == "https://b.example/nf"
        assert "NotFound" not in VARIANTS

    def test_tagged_declaration_registers_variant(self) -> None:
        """Test class keywords with a variant tag fill the shared table."""

        class Tagged(
            Corner,
            variant="TaggedTimeout",
            helpful_message="The upstream service timed out.",
            support_link="https://example.com/help/timeout",
        ):
            pass

        class AlsoTagged(CornerError, variant="TaggedTimeout"):
            pass

        assert "TaggedTimeout" in VARIANTS
        assert Tagged.decoration is None
        assert AlsoTagged().get_helpful_message() == "The upstream service timed out."

    def test_subclass_inherits_base_decoration(self) -> None:
        """Test subclasses without their own entry use the base's entry."""

        class SpecificFoo(FooException):
            pass

        ex = SpecificFoo("test")

        assert SpecificFoo.variant_name() == "SpecificFoo"
        assert ex.get_helpful_message() == "This is an example of the Exception class"

    def test_subclass_own_entry_wins(self) -> None:
        class OverriddenFoo(
            FooException,
            helpful_message="A more specific message",
            support_link="https://example.com/help/foo",
        ):
            pass

        assert OverriddenFoo().get_helpful_message() == "A more specific message"

    def test_variant_tag_shared_between_classes(self) -> None:
        """Test two classes can point at the same table entry."""
        VARIANTS.register("Shared", "Shared help", "https://example.com/help/shared")

        class First(Corner, variant="Shared"):
            pass

        class Second(CornerError, variant="Shared"):
            pass

        assert First().get_helpful_message() == Second().get_helpful_message() == "Shared help"

    def test_class_level_decoration(self) -> None:
        class Fixed(Corner):
            decoration = Decoration("Fixed help", "https://example.com/help/fixed")

        assert Fixed().get_helpful_message() == "Fixed help"

    def test_class_level_registry(self) -> None:
        registry = DecorationRegistry()
        registry.register("Private", "Private help", "https://example.com/help/private")

        class Private(Corner):
            pass

        Private.registry = registry

        assert Private().get_helpful_message() == "Private help"
        assert "Private" not in VARIANTS

    def test_invalid_declaration_rejected(self) -> None:
        """Test class declarations with a bad decoration fail at definition time."""
        with pytest.raises(InvalidArgumentError):

            class Broken(Corner, helpful_message="Help", support_link="not a url"):
                pass


class TestSnippet:
    """Test snippets taken from the real call stack."""

    def test_snippet(self) -> None:
        try:
            # Canary string: 15f3456a04616adc5b42f3533d41a43aa2bad7eee2e914684ec86c3b84b71c61
            raise FooException("test")
        except Corner as ex:
            assert MARKER not in ex.get_snippet(0, 0)
            assert MARKER not in ex.get_snippet(0, 1)
            assert MARKER in ex.get_snippet(1, 0)
            assert MARKER not in ex.get_snippet(1, 0, 1)
            assert MARKER not in ex.get_snippet(5, 5, 1)
            assert MARKER not in ex.get_snippet(5, 5, 2)
            assert MARKER not in ex.get_snippet(5, 5, 3)

    def test_snippet_zero_context_is_raise_line(self) -> None:
        try:
            raise FooError("test")
        except Corner as ex:
            assert ex.get_snippet(0, 0) == '            raise FooError("test")'

    def test_snippet_of_caller(self) -> None:
        try:
            # We're adding some padding here.

            self._subcall()

            # We're adding some padding here.
        except Corner as ex:
            assert SUBCALL_MARKER in ex.get_snippet(1, 0)
            assert SUBCALL_MARKER not in ex.get_snippet(1, 1, 1)
            assert "_subcall()" in ex.get_snippet(1, 1, 1)

    def test_offsets_stabilize_at_outermost_frame(self) -> None:
        ex = FooException("test")
        depth = len(ex.captured_stack)

        outermost = ex.get_snippet(1, 1, depth - 1)

        assert ex.get_snippet(1, 1, depth) == outermost
        assert ex.get_snippet(1, 1, depth + 10) == outermost

    def test_snippet_idempotent(self) -> None:
        ex = FooException("test")
        assert ex.get_snippet(3, 3, 1) == ex.get_snippet(3, 3, 1)

    def test_snippet_from_virtual_file_is_empty(self) -> None:
        """Test code without a source file yields "" rather than raising."""
        namespace = {"FooException": FooException}
        try:
            exec(compile("raise FooException('test')", "<string>", "exec"), namespace)
        except Corner as ex:
            assert ex.get_snippet(2, 2) == ""
            assert "exec(compile(" in ex.get_snippet(0, 0, 1)

    @pytest.mark.parametrize(
        ("before", "after", "offset"),
        [(-1, 0, 0), (0, -1, 0), (0, 0, -1)],
    )
    def test_negative_arguments_rejected(self, before: int, after: int, offset: int) -> None:
        ex = FooException("test")

        with pytest.raises(InvalidArgumentError):
            ex.get_snippet(before, after, offset)

    def _subcall(self) -> None:
        # Canary string: 6115f3456a04616adc5b42f3533d41a43aa2bad7eee2e914684ec86c3b84b71c
        raise FooException("test")


class TestInjectedStack:
    """Test decorated errors with synthetic stacks."""

    def test_set_stack_provider(self, numbered_file: Path) -> None:
        provider = StaticStackProvider(
            [
                StackFrame(str(numbered_file), 5, "inner"),
                StackFrame(str(numbered_file), 15, "outer"),
            ]
        )
        previous = set_stack_provider(provider)

        try:
            ex = FooException("test")
        finally:
            set_stack_provider(previous)

        assert get_stack_provider() is previous
        assert ex.get_snippet(1, 1) == "line 4\nline 5\nline 6"
        assert ex.get_snippet(0, 0, 1) == "line 15"
        assert ex.get_snippet(0, 0, 7) == "line 15"

    def test_class_level_provider(self, numbered_file: Path) -> None:
        class Injected(FooException):
            stack_provider = StaticStackProvider([StackFrame(str(numbered_file), 20, "f")])

        assert Injected().get_snippet(2, 2) == "line 18\nline 19\nline 20"

    def test_empty_stack_yields_empty_snippets(self) -> None:
        class NoStack(FooException):
            stack_provider = StaticStackProvider()

        ex = NoStack("test")

        assert len(ex.captured_stack) == 0
        assert ex.get_snippet(0, 0) == ""
        assert ex.get_snippet(5, 5, 3) == ""
