import logging
from pathlib import Path
import sys

import click

from gtenum.core.growtopia.items_enum import ItemsEnumGenerator
from gtenum.core.growtopia.items_json import load_items_file
from gtenum.core.log import setup_logger
from gtenum.setting import Setting, setting_path


def _load_or_fail(gen: ItemsEnumGenerator, path: str) -> None:
    try:
        gen.load_from_file(path)
    except (OSError, ValueError, TypeError) as e:
        logging.getLogger("items_enum").error(f"failed to load {path}: {e}")
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("path", type=click.Path())
@click.option("--tab-size", type=click.IntRange(min=0), default=None, help="indent width in spaces")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="write the enum here instead of stdout")
@click.option("-v", "verbose", is_flag=True, help="debug logging")
def items_enum(path: str, tab_size: int | None, output: str | None, verbose: bool) -> None:
    """Generate `enum eItems` from an items.json catalog."""
    try:
        s = Setting.load(setting_path())
    except (OSError, ValueError, TypeError) as e:
        raise click.ClickException(f"bad setting file: {e}") from e

    setup_logger("items_enum", log_dir=s.log_dir, level=logging.DEBUG if verbose else logging.INFO, stream=sys.stderr)

    gen = ItemsEnumGenerator()
    _load_or_fail(gen, path)
    code = gen.build_enum(tab_size if tab_size is not None else s.tab_size)

    if output is None:
        click.echo(code, nl=False)
        return

    p = Path(output)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(code, encoding="utf-8")
    logging.getLogger("items_enum").info(f"wrote {p}")


@click.command()
@click.argument("path", type=click.Path())
def items_info(path: str) -> None:
    try:
        items = load_items_file(path)
    except (OSError, ValueError, TypeError) as e:
        raise click.ClickException(str(e)) from e

    print(f"version: {items.version}")
    print(f"item_count: {items.item_count}")
    print(f"entries: {len(items)}")
