"""Split a command's argument string into values keyed by prefix (e.g. n/, a/)."""

from dataclasses import dataclass

from roster.application.errors import ParseError
from roster.application.messages import MESSAGE_DUPLICATE_FIELDS


@dataclass(frozen=True)
class Prefix:
    """Marker that introduces an argument value, e.g. "n/" for a name."""

    token: str

    def __str__(self) -> str:
        return self.token


class ArgumentMultimap:
    """Prefix -> values in order of appearance, plus the unprefixed preamble."""

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Last value given for prefix, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has_any(self, *prefixes: Prefix) -> bool:
        return any(prefix in self._values for prefix in prefixes)

    def has_all(self, *prefixes: Prefix) -> bool:
        return all(prefix in self._values for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS.format(" ".join(map(str, duplicated))))


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Tokenize args into an ArgumentMultimap.

    A prefix only counts when it starts the string or follows whitespace, so
    "a/" inside "sana/road" is left alone. Each value runs from the end of its
    prefix to the start of the next recognized prefix and is trimmed. Unknown
    prefixes stay part of the surrounding value. Never fails.
    """
    positions = _find_prefix_positions(args or "", prefixes)
    positions.sort(key=lambda item: item[0])

    first = positions[0][0] if positions else len(args or "")
    multimap = ArgumentMultimap(preamble=(args or "")[:first].strip())
    for i, (start, prefix) in enumerate(positions):
        value_start = start + len(prefix.token)
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        multimap.put(prefix, args[value_start:value_end].strip())
    return multimap


def _find_prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[tuple[int, Prefix]]:
    found: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        start = args.find(prefix.token)
        while start != -1:
            if start == 0 or args[start - 1].isspace():
                found.append((start, prefix))
            start = args.find(prefix.token, start + 1)
    return found
