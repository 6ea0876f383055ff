"""Decorated exceptions: helpful message, support link and source snippets.

``Corner`` is both the capability and the type to catch. It combines with
any built-in exception base, so one implementation serves every variant:

    class QuotaExceeded(Corner, RuntimeError, variant="QuotaExceeded",
                        helpful_message="The account ran out of quota.",
                        support_link="https://example.com/help/quota"):
        pass

    try:
        raise QuotaExceeded("42 requests over the limit")
    except Corner as ex:
        print(ex.get_helpful_message())
        print(ex.get_snippet(2, 2))
"""

from __future__ import annotations

import threading
from typing import Any, ClassVar

from corner.core.registry import VARIANTS, DecorationRegistry
from corner.core.snippet import SnippetExtractor
from corner.core.stack_capture import RuntimeStackProvider
from corner.interfaces.stack import StackProvider
from corner.models.frame import CapturedStack
from corner.models.snippet import Decoration, SnippetRequest

_stack_provider: StackProvider = RuntimeStackProvider()
_provider_lock = threading.Lock()


def get_stack_provider() -> StackProvider:
    """Get the stack provider used by errors that don't set their own."""
    return _stack_provider


def set_stack_provider(provider: StackProvider) -> StackProvider:
    """Replace the process-wide stack provider.

    Args:
        provider: New provider

    Returns:
        The previous provider, so callers can restore it
    """
    global _stack_provider
    with _provider_lock:
        previous = _stack_provider
        _stack_provider = provider
    return previous


class Corner(Exception):
    """Base of all decorated errors.

    Class attributes:
        variant: Tag looked up in the registry (defaults to the class name;
            unregistered subclasses fall back to their bases' tags)
        decoration: Fixed decoration that bypasses the registry; set by the
            ``helpful_message``/``support_link`` class keywords when no
            ``variant`` tag is given
        registry: Variant table to use (defaults to the global one)
        stack_provider: Stack provider to use (defaults to the global one)
    """

    variant: ClassVar[str | None] = None
    decoration: ClassVar[Decoration | None] = None
    registry: ClassVar[DecorationRegistry | None] = None
    stack_provider: ClassVar[StackProvider | None] = None

    def __init_subclass__(
        cls,
        variant: str | None = None,
        helpful_message: str | None = None,
        support_link: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if variant is not None:
            cls.variant = variant
        elif "variant" not in cls.__dict__:
            cls.variant = None

        if helpful_message is None and support_link is None:
            return

        decoration = Decoration(helpful_message or "", support_link or "")
        if cls.variant is not None:
            cls._registry().register(cls.variant, decoration)
        else:
            # Untagged classes own their decoration; class names are not unique
            cls.decoration = decoration

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self._decoration = self._resolve_decoration()
        provider = type(self).stack_provider or get_stack_provider()
        self._captured_stack = provider.capture(owner=self)
        self._snippets = SnippetExtractor()

    @classmethod
    def variant_name(cls) -> str:
        """The tag this class is registered under."""
        return cls.variant or cls.__name__

    @classmethod
    def _registry(cls) -> DecorationRegistry:
        return cls.registry if cls.registry is not None else VARIANTS

    def _resolve_decoration(self) -> Decoration:
        cls = type(self)
        registry = cls._registry()

        # Nearest class in the MRO with a decoration of its own or a table entry
        for klass in cls.__mro__:
            if not issubclass(klass, Corner):
                continue
            own = klass.__dict__.get("decoration")
            if own is not None:
                return own
            entry = registry.get(klass.variant_name())
            if entry is not None:
                return entry
        return registry.lookup(cls.variant_name())

    @property
    def helpful_message(self) -> str:
        return self._decoration.helpful_message

    @property
    def support_link(self) -> str:
        return self._decoration.support_link

    @property
    def captured_stack(self) -> CapturedStack:
        """Stack captured when this error was built, innermost frame first."""
        return self._captured_stack

    def get_message(self) -> str:
        """Return the error's own message."""
        return str(self.args[0]) if self.args else ""

    def get_helpful_message(self) -> str:
        """Return the helpful message of this error's variant."""
        return self._decoration.helpful_message

    def get_support_link(self) -> str:
        """Return the support link of this error's variant."""
        return self._decoration.support_link

    def get_snippet(self, lines_before: int, lines_after: int, frame_offset: int = 0) -> str:
        """Return source lines around a frame of the captured stack.

        Args:
            lines_before: Lines to include above the frame's line
            lines_after: Lines to include below the frame's line
            frame_offset: 0 for the line that raised, higher to walk out
                through the callers; clipped to the outermost frame

        Returns:
            The source window, or "" when the frame has no readable source

        Raises:
            InvalidArgumentError: If any argument is negative or not an integer
        """
        request = SnippetRequest(lines_before, lines_after, frame_offset)
        return self._snippets.extract(self._captured_stack, request)


class CornerError(Corner, RuntimeError):
    """Decorated error for failures detected at runtime."""
