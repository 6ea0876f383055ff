"""Declarative table of error variants and their decorations.

Tagged error classes and configuration files register their helpful
message and support link here; instances look them up when they are
built, instead of wiring them up in every subclass constructor.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping

from corner.models.snippet import Decoration
from corner.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)

DEFAULT_HELPFUL_MESSAGE = (
    "No helpful message has been registered for this error. "
    "Inspect the snippet and the stack trace for more context."
)
DEFAULT_SUPPORT_LINK = "https://github.com/Sura-laboratory/corner"


class DecorationRegistry:
    """Maps variant tags to decorations.

    Example:
        registry = DecorationRegistry()
        registry.register("Example", "This is an example.", "https://example.com/help")
        registry.lookup("Example").support_link
    """

    def __init__(
        self,
        variants: Mapping[str, Decoration] | None = None,
        default: Decoration | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            variants: Initial variant table
            default: Decoration used for unregistered variants
        """
        self._variants: dict[str, Decoration] = dict(variants or {})
        self._default = default or Decoration(DEFAULT_HELPFUL_MESSAGE, DEFAULT_SUPPORT_LINK)
        self._lock = threading.Lock()

    @property
    def default(self) -> Decoration:
        """Decoration used for variants missing from the table."""
        return self._default

    @default.setter
    def default(self, decoration: Decoration) -> None:
        self._default = decoration

    def __contains__(self, variant: object) -> bool:
        return variant in self._variants

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._variants))

    def register(
        self,
        variant: str,
        helpful_message: str | Decoration,
        support_link: str | None = None,
    ) -> Decoration:
        """Register or replace the decoration of a variant.

        Args:
            variant: Variant tag
            helpful_message: Helpful message, or a complete Decoration
            support_link: Support link (required unless a Decoration is given)

        Returns:
            The registered decoration

        Raises:
            InvalidArgumentError: If the message or link is invalid
        """
        if isinstance(helpful_message, Decoration):
            decoration = helpful_message
        else:
            decoration = Decoration(
                helpful_message=helpful_message, support_link=support_link or ""
            )

        with self._lock:
            self._variants[variant] = decoration

        log.debug(LogEventNames.VARIANT_REGISTERED, variant=variant)
        return decoration

    def unregister(self, variant: str) -> None:
        """Remove a variant from the table, if present."""
        with self._lock:
            self._variants.pop(variant, None)

    def get(self, variant: str) -> Decoration | None:
        """Get the decoration of a registered variant, or None."""
        return self._variants.get(variant)

    def lookup(self, variant: str) -> Decoration:
        """Get the decoration of a variant, falling back to the default.

        Args:
            variant: Variant tag

        Returns:
            The registered decoration, or the default one
        """
        decoration = self._variants.get(variant)
        if decoration is None:
            log.debug(LogEventNames.VARIANT_NOT_REGISTERED, variant=variant)
            return self._default
        return decoration

    def items(self) -> list[tuple[str, Decoration]]:
        """Return (variant, decoration) pairs sorted by variant tag."""
        with self._lock:
            return sorted(self._variants.items())

    def clear(self) -> None:
        """Remove every variant from the table."""
        with self._lock:
            self._variants.clear()


VARIANTS = DecorationRegistry()
