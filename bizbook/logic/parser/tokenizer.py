# bizbook/logic/parser/tokenizer.py
"""
Splits an argument string such as ` 1 n/Alice Tan t/vip t/regular` into the
preamble (`1`) and the values of each prefix.

A prefix only counts when it follows whitespace, so `dt/` never matches `t/`.
"""

import re
from typing import Dict, List, Optional, Tuple


class ArgumentMultimap:
    def __init__(self, preamble: str, values: Dict[str, List[str]]):
        self._preamble = preamble
        self._values = values

    @property
    def preamble(self) -> str:
        return self._preamble

    def has(self, prefix: str) -> bool:
        return prefix in self._values

    def get_value(self, prefix: str) -> Optional[str]:
        """Last value given for `prefix`, or None if it is absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={self._values!r})"


def _find_positions(arguments: str, prefixes: Tuple[str, ...]) -> List[Tuple[int, str]]:
    positions = []
    for prefix in prefixes:
        for match in re.finditer(r"(?<=\s)" + re.escape(prefix), arguments):
            positions.append((match.start(), prefix))
    positions.sort()
    return positions


def tokenize(arguments: str, *prefixes: str) -> ArgumentMultimap:
    # Leading space so that a prefix at the very start is still recognised.
    arguments = " " + arguments
    positions = _find_positions(arguments, prefixes)

    end_of_preamble = positions[0][0] if positions else len(arguments)
    preamble = arguments[:end_of_preamble].strip()

    values: Dict[str, List[str]] = {}
    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(arguments)
        values.setdefault(prefix, []).append(arguments[start + len(prefix):end].strip())
    return ArgumentMultimap(preamble, values)
