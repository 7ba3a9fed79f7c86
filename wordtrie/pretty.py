# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print command results as tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, Sequence, TextIO

import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Sequence[str]


def format_item(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple)):
        return ", ".join(format_item(entry) for entry in value)
    if value is None:
        return ""
    return str(value)


def yield_table(result: ResultType, table_layout: TableLayout | None = None, header: bool = True) -> Iterator[str]:
    """
    format a list of dicts in a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Columns to print, in order. Defaults to every key, sorted.
    :param bool header: True to print the column names
    """
    formatted_rows = [{key: format_item(value) for key, value in item.items()} for item in result]
    if table_layout is None:
        table_layout = sorted({key for row in formatted_rows for key in row})

    widths = {column: len(column) for column in table_layout}
    for row in formatted_rows:
        for column in table_layout:
            widths[column] = max(widths[column], len(row.get(column, "")))

    if header:
        yield "  ".join(column.upper().ljust(widths[column]) for column in table_layout).rstrip()
        yield "  ".join("=" * widths[column] for column in table_layout)
    for row in formatted_rows:
        yield "  ".join(row.get(column, "").ljust(widths[column]) for column in table_layout).rstrip()


def print_table(
    result: Collection[Any] | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts as a table, or any other list one item per line"""

    def yield_rows() -> Iterator[str]:
        if not result:
            return
        elif not isinstance(next(iter(result), None), Mapping):
            yield from (format_item(item) for item in result)
        else:
            yield from yield_table(result, table_layout=table_layout, header=header)

    for row in yield_rows():
        print(row, file=file or sys.stdout)
