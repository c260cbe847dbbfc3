"""FlagValue and the operations that build, test and decode bit flags."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Union

from .definitions import FlagDefinition, FlagLabel

log = logging.getLogger(__name__)

# Letters used for the flagstring; each letter carries three bits
LETTER_MAP = ['B', 'C', 'D', 'F', 'G', 'H', 'K', 'L']
VALID_LETTERS = {letter: idx for idx, letter in enumerate(LETTER_MAP)}

LabelLike = Union[str, FlagLabel]


def _label_name(label: LabelLike) -> str:
    return label.name if isinstance(label, FlagLabel) else label


def _check_integer(key: str, value) -> int:
    # bool is an int subclass but never a valid flag value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Flag '{key}' expects integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class FlagValue:
    """An immutable combination of labels from one FlagDefinition.

    There is no __int__ or __index__: use to_integer() and
    from_integer() to cross between flag values and plain integers.
    """
    definition: FlagDefinition
    bits: int = 0

    def __post_init__(self):
        _check_integer(self.definition.key, self.bits)

    def __or__(self, other: 'FlagValue') -> 'FlagValue':
        if not isinstance(other, FlagValue):
            return NotImplemented
        if other.definition is not self.definition:
            raise ValueError(
                f"Cannot combine flag '{self.definition.key}' with flag '{other.definition.key}'"
            )
        return FlagValue(self.definition, self.bits | other.bits)

    def __contains__(self, label: LabelLike) -> bool:
        return contains(self, label)

    def __iter__(self) -> Iterator[str]:
        return iter(decode(self))

    def __len__(self) -> int:
        return len(decode(self))

    def __bool__(self) -> bool:
        return self.bits != 0

    def __repr__(self) -> str:
        return f"FlagValue({self.definition.key!r}, {self.bits}: {self.describe()})"

    def describe(self) -> str:
        """Human readable form, e.g. 'March | April | May' or 'None'."""
        names = [self.definition.get_label(name).title for name in decode(self)]
        return " | ".join(names) if names else "None"


def combine(definition: FlagDefinition, labels: Iterable[LabelLike]) -> FlagValue:
    """OR together the bit of every label; the empty selection gives 0."""
    bits = 0
    for label in set(_label_name(label) for label in labels):
        bits |= definition.mask(label)
    log.debug(f"Combined {definition.key} labels into {bits}")
    return FlagValue(definition, bits)


def contains(value: FlagValue, label: LabelLike) -> bool:
    """True if every bit of the label's mask is set in value."""
    mask = value.definition.mask(_label_name(label))
    return (value.bits & mask) == mask


def decode(value: FlagValue) -> List[str]:
    """Return the labels set in value, in definition order.

    Bits above the defined label count are never tested and so are ignored.
    """
    names = [label.name for label in value.definition if contains(value, label)]
    log.debug(f"Decoded {value.definition.key} value {value.bits} into {names}")
    return names


def to_integer(value: FlagValue) -> int:
    return value.bits


def from_integer(definition: FlagDefinition, bits: int) -> FlagValue:
    return FlagValue(definition, _check_integer(definition.key, bits))


def to_flagstring(value: FlagValue) -> str:
    """Encode the defined bits of value as letters, three bits per letter.

    The first label is the high bit of the first letter and the final
    letter is padded with zero bits.
    """
    binary_str = ''.join(
        '1' if contains(value, label) else '0' for label in value.definition
    )
    if len(binary_str) % 3:
        binary_str += '0' * (3 - len(binary_str) % 3)
    return ''.join(
        LETTER_MAP[int(binary_str[index:index + 3], 2)]
        for index in range(0, len(binary_str), 3)
    )


def from_flagstring(definition: FlagDefinition, flagstring: str) -> FlagValue:
    """Parse a flagstring produced by to_flagstring()."""
    normalized = flagstring.strip().upper()
    if not normalized:
        raise ValueError("Flagstring cannot be empty.")

    invalid_chars = sorted({c for c in normalized if c not in VALID_LETTERS})
    if invalid_chars:
        raise ValueError(
            f"Flagstring contains invalid characters: {', '.join(invalid_chars)}")

    binary_str = ''.join(format(VALID_LETTERS[c], '03b') for c in normalized)
    bits = 0
    for index, label in enumerate(definition):
        if index >= len(binary_str):
            break
        if binary_str[index] == '1':
            bits |= label.mask
    return FlagValue(definition, bits)
