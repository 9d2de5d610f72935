#!/usr/bin/env -S uv run --script
import importlib
import pkgutil
from traceback import print_exc
from types import ModuleType
from typing import Iterator
import click

import scripts


@click.group()
def cli() -> None:
    pass


def _commands(module: ModuleType) -> Iterator[tuple[str, click.Command]]:
    for attr_name, attr in vars(module).items():
        if attr_name.startswith("_"):
            continue
        if isinstance(attr, click.Command) and not isinstance(attr, click.Group):
            yield attr_name.replace("_", "-"), attr


def _discover_commands() -> None:
    for _, name, ispkg in pkgutil.iter_modules(scripts.__path__, scripts.__name__ + "."):
        module_name = name.rsplit(".", 1)[-1]
        if ispkg or module_name == "cli":
            continue

        try:
            module = importlib.import_module(name)
        except Exception:
            print(f"MODULE: \x1b[31m{module_name}\x1b[0m", "=" * 50)
            print_exc()
            print("=" * 50)
            continue

        for command_name, command in _commands(module):
            cli.add_command(command, name=command_name)


_discover_commands()


if __name__ == "__main__":
    cli()
