"""Scanner states and fence constants.

The scanner is a finite state machine. Each state names the scanner method
that runs next; a state of ``None`` means the run is over.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from splitmatter.items import ItemType


class ScanState(Enum):
    """Scanner states.

    - DETECT: Inspect the first rune and pick a frontmatter format
    - TOML: Inside ``+++`` fenced frontmatter
    - YAML: Inside ``---`` fenced frontmatter
    - JSON: Inside a ``{...}`` frontmatter object
    - CONTENT: Everything after the frontmatter
    - DONE: Emit the end marker

    """

    DETECT = auto()
    TOML = auto()
    YAML = auto()
    JSON = auto()
    CONTENT = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class Fence:
    """A line-delimited frontmatter fence such as ``+++``."""

    char: str
    name: str
    item_type: ItemType

    @property
    def delimiter(self) -> bytes:
        return (self.char * 3).encode("ascii")


TOML_FENCE = Fence("+", "TOML", ItemType.FRONTMATTER_TOML)
YAML_FENCE = Fence("-", "YAML", ItemType.FRONTMATTER_YAML)

FENCES: dict[ScanState, Fence] = {
    ScanState.TOML: TOML_FENCE,
    ScanState.YAML: YAML_FENCE,
}

JSON_OPEN = "{"
JSON_CLOSE = "}"
