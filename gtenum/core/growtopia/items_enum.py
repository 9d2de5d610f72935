from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterable

from gtenum.core.c import IdentifierRegistry, guard_keyword, is_sentinel, normalize_ident, prefix_digit
from gtenum.core.growtopia.items_json import ItemData, ItemsFile, load_items_file


ENUM_NAME = "eItems"

logger = logging.getLogger("items_enum")


class NotLoadedError(RuntimeError):
    pass


@dataclass(slots=True)
class BuildStats:
    emitted: int = 0
    dropped: int = 0
    guarded: int = 0
    renamed: int = 0


def resolve_idents(items: Iterable[ItemData], stats: BuildStats | None = None) -> list[tuple[str, int]]:
    """Turn catalog entries into `(identifier, item_id)` pairs, in catalog order.

    Placeholder names are skipped. Keyword collisions get a trailing `_` and
    repeated names get `_2`, `_3`, ... with the earliest entry keeping the bare name.
    """
    stats = stats if stats is not None else BuildStats()
    registry = IdentifierRegistry()
    entries: list[tuple[str, int]] = []

    for item in items:
        body = normalize_ident(item.name)
        if is_sentinel(body):
            logger.debug(f"dropping item {item.item_id} ({item.name!r})")
            stats.dropped += 1
            continue

        base = prefix_digit(body)
        guarded = guard_keyword(base)
        if guarded != base:
            logger.debug(f"item {item.item_id}: {base} is reserved, using {guarded}")
            stats.guarded += 1

        ident = registry.dedup(guarded)
        if ident != guarded:
            logger.debug(f"item {item.item_id}: {guarded} already taken, using {ident}")
            stats.renamed += 1

        entries.append((ident, item.item_id))
        stats.emitted += 1

    return entries


def render_enum(entries: Iterable[tuple[str, int]], tab_size: int = 4) -> str:
    if tab_size < 0:
        raise ValueError(f"tab_size must be non-negative, got {tab_size}")

    indent = " " * tab_size
    lines = [f"{indent}{name} = {id}," for name, id in entries]
    return f"enum {ENUM_NAME} {{\n" + "\n".join(lines) + "\n};\n"


class ItemsEnumGenerator:

    def __init__(self, items: ItemsFile | None = None) -> None:
        self._items = items
        self.last_stats: BuildStats | None = None

    @property
    def loaded(self) -> bool:
        return self._items is not None

    @property
    def items_version(self) -> int:
        return self._items.version if self._items is not None else -1

    @property
    def items_count(self) -> int:
        return self._items.item_count if self._items is not None else -1

    def load_from_file(self, path: str | Path) -> None:
        self._items = load_items_file(path)

    def build_enum(self, tab_size: int = 4) -> str:
        if self._items is None:
            raise NotLoadedError("items data not loaded, load a catalog before building the enum")

        stats = BuildStats()
        entries = resolve_idents(self._items.items, stats)
        self.last_stats = stats
        logger.info(f"built {ENUM_NAME}: {stats.emitted} emitted, {stats.dropped} dropped, {stats.guarded} reserved, {stats.renamed} renamed")

        return render_enum(entries, tab_size)
