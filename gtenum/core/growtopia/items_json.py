from dataclasses import dataclass, field
import logging
from pathlib import Path

from gtenum.core.mixin import JsonMixin


logger = logging.getLogger("items_json")


@dataclass(frozen=True, slots=True)
class ItemData(JsonMixin):
    item_id: int
    name: str


@dataclass(frozen=True, slots=True)
class ItemsFile(JsonMixin):
    version: int
    item_count: int
    items: list[ItemData] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


def load_items_file(path: str | Path) -> ItemsFile:
    """Read and validate an `items.json` catalog.

    The path must name an existing regular file ending in `.json`. The
    declared `item_count` is only reported, it is not checked against the
    number of entries in `items`.
    """
    path = Path(path)
    if path.suffix != ".json":
        raise ValueError(f"invalid file type, expected a .json file: {path}")

    if not path.exists():
        raise FileNotFoundError(f"no such file: {path}")

    if not path.is_file():
        raise ValueError(f"not a valid file: {path}")

    items = ItemsFile.from_json_file(path)
    logger.info(f"loaded {path} (version={items.version}, item_count={items.item_count}, entries={len(items)})")
    if items.item_count != len(items):
        logger.warning(f"declared item_count {items.item_count} does not match {len(items)} entries")

    return items
