"""Flag declarations: the short and long forms that identify an option."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from optclaim.core.constants import LONG_PREFIX, SHORT_PREFIX
from optclaim.core.exceptions import DeclarationError
from optclaim.parsing.tokens import has_long_prefix, has_short_prefix


@dataclass(frozen=True)
class Flag:
    """A canonical short/long flag pair.

    Build instances with ``Flag.from_names``; names are given without prefixes
    and a one-character name becomes the short form.

    Attributes:
        short: Short form such as ``-v``, or None
        long: Long form such as ``--verbose``, or None
    """

    short: str | None = None
    long: str | None = None

    def __post_init__(self):
        if self.short is None and self.long is None:
            raise DeclarationError("an option requires either short, long, or short + long flags", [])

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Flag:
        """
        Create a flag from one or two bare names.

        Raises:
            DeclarationError: names carry a prefix, are empty, are more than two,
                or two names are not one short and one long.
        """
        names = list(names)

        if any(has_short_prefix(name) or has_long_prefix(name) for name in names):
            raise DeclarationError(
                f"flags cannot start with {SHORT_PREFIX} or {LONG_PREFIX}, "
                "prefix should be omitted when specifying flags",
                names,
            )

        if any(len(name) == 0 for name in names):
            raise DeclarationError("an option's flag cannot have zero length", names)

        ordered = sorted(names, key=len)

        if len(ordered) == 1:
            if len(ordered[0]) == 1:
                return cls(short=SHORT_PREFIX + ordered[0])
            return cls(long=LONG_PREFIX + ordered[0])

        if len(ordered) == 2:
            if len(ordered[0]) != 1 or len(ordered[1]) <= 1:
                raise DeclarationError("an option with 2 flags requires one short and one long flag", ordered)
            return cls(short=SHORT_PREFIX + ordered[0], long=LONG_PREFIX + ordered[1])

        raise DeclarationError("an option requires either short, long, or short + long flags", names)

    @property
    def values(self) -> list[str]:
        """All present forms, short first."""
        return [form for form in (self.short, self.long) if form is not None]

    def __contains__(self, token: object) -> bool:
        return token in self.values

    def __str__(self) -> str:
        return ", ".join(self.values)
