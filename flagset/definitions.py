"""Flag definition classes: an ordered, fixed table of labels and their bits."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

# Widest integer representation a definition may declare
MAX_WIDTH = 32


@dataclass(frozen=True)
class FlagLabel:
    """A single named flag and the bit it occupies."""
    name: str
    position: int
    display_name: str = ""

    @property
    def mask(self) -> int:
        """The integer with only this label's bit set."""
        return 1 << self.position

    @property
    def title(self) -> str:
        return self.display_name or self.name


class FlagDefinition:
    """An ordered set of labels, each assigned the bit matching its index."""

    def __init__(
        self,
        key: str,
        display_name: str,
        help_text: str,
        labels: Iterable[str],
        width: int = MAX_WIDTH,
        display_names: Optional[Dict[str, str]] = None
    ):
        self.key = key
        self.display_name = display_name
        self.help_text = help_text
        self.width = width

        names = list(labels)
        if width < 1 or width > MAX_WIDTH:
            raise ValueError(
                f"Flag '{key}' width {width} outside 1..{MAX_WIDTH}"
            )
        if len(names) > width:
            raise ValueError(
                f"Flag '{key}' has {len(names)} labels, more than its width of {width} bits"
            )
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"Flag '{key}' has duplicate labels: {', '.join(duplicates)}"
            )

        display_names = display_names or {}
        self._labels: List[FlagLabel] = [
            FlagLabel(name, position, display_names.get(name, ""))
            for position, name in enumerate(names)
        ]
        self._by_name: Dict[str, FlagLabel] = {label.name: label for label in self._labels}

    def __repr__(self) -> str:
        return f"FlagDefinition({self.key!r}, {len(self._labels)} labels)"

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self):
        return iter(self._labels)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def labels(self) -> List[FlagLabel]:
        """Labels in definition order."""
        return list(self._labels)

    @property
    def names(self) -> List[str]:
        return [label.name for label in self._labels]

    @property
    def all_mask(self) -> int:
        """Mask with every defined label's bit set."""
        return (1 << len(self._labels)) - 1

    def get_label(self, name: str) -> FlagLabel:
        """Look up a label by exact name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Flag '{self.key}' has no label '{name}'") from None

    def find_label(self, name: str) -> FlagLabel:
        """Look up a label ignoring case, for user-typed names."""
        lowered = name.strip().lower()
        for label in self._labels:
            if label.name.lower() == lowered:
                return label
        raise KeyError(f"Flag '{self.key}' has no label '{name}'")

    def position(self, name: str) -> int:
        return self.get_label(name).position

    def mask(self, name: str) -> int:
        return self.get_label(name).mask
