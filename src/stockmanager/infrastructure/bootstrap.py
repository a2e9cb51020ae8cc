"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory is, in order of precedence: the explicit argument
(``--data-dir`` on the CLI), the ``STOCKMANAGER_DATA_DIR`` environment
variable, ``./data`` under the current working directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from stockmanager.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

DATA_DIR_ENV = "STOCKMANAGER_DATA_DIR"
STORE_FILENAME = "stock.json"


def resolve_data_dir(data_dir: str | Path | None = None) -> Path:
    if data_dir:
        return Path(data_dir)
    from_env = os.environ.get(DATA_DIR_ENV)
    if from_env:
        return Path(from_env)
    return Path.cwd() / "data"


def unit_of_work(data_dir: str | Path | None = None) -> JsonUnitOfWork:
    return JsonUnitOfWork(resolve_data_dir(data_dir) / STORE_FILENAME)
