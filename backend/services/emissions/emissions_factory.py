# services/emissions/emissions_factory.py
from __future__ import annotations
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from config import get_factors_file
from .factors import EmissionFactorTable

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _load(path: Optional[Path]) -> EmissionFactorTable:
    if path is None:
        return EmissionFactorTable.seed()
    return EmissionFactorTable.from_file(path)


def get_factor_table(path: Optional[Path] = None) -> EmissionFactorTable:
    """
    Return a cached factor table.
    - explicit path / EMISSION_FACTORS_FILE -> CSV or XLSX export
    - otherwise                             -> built-in seed table
    Unlike a missing factor at lookup time, a broken configured file is fatal.
    """
    path = path or get_factors_file()
    table = _load(path)
    logger.debug("using emission factor table '%s' (%d active)", table.name, len(table))
    return table


def clear_cache() -> None:
    _load.cache_clear()
