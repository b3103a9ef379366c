#!/usr/bin/env python3
"""
Spreadsheet data module.

This module reads and writes single cells of an .xlsx workbook so test
data can live next to the tests. Row and column indices are zero-based.
"""

import os
import re
from typing import Iterable, List, Optional

from openpyxl import Workbook, load_workbook
from openpyxl.utils.escape import escape, unescape

from ..utils.log import get_logger

logger = get_logger(__name__)

# Cell types a text value can come back as; an empty inline string reloads as None.
_TEXT_TYPES = ("s", "inlineStr")
# Control characters openpyxl's escape() leaves alone.
_UNESCAPED_CONTROL = re.compile(r"[\x00\x1a-\x1f]")


def _encode_text(text: str) -> str:
    """
    Spell a string the way OOXML stores it.

    Control characters become _xHHHH_ and a literal "_x" becomes "_x005F_x",
    so unescape() gives back exactly the original text.
    """
    text = escape(text.replace("_x", "_x005F_x"))
    return _UNESCAPED_CONTROL.sub(lambda m: "_x{:0>4x}_".format(ord(m.group(0))), text)


class SpreadsheetSession:
    """
    A loaded workbook and the path it is saved back to.

    Each session is independent; open one per workbook. Sessions are not
    safe for concurrent use.
    """

    def __init__(self, path: str, autoload: bool = True):
        """
        Initialize the session.

        Args:
            path: Path to the .xlsx file
            autoload: Whether to load the workbook immediately
        """
        self.path = path
        self.workbook = None
        if autoload:
            self.load(path)

    @classmethod
    def create(cls, path: str, sheets: Iterable[str] = ("Sheet1",)) -> "SpreadsheetSession":
        """
        Create a new workbook on disk and return a session bound to it.

        Args:
            path: Destination path; an existing file is overwritten
            sheets: Names of the sheets to create, in order

        Returns:
            SpreadsheetSession: Session over the new workbook
        """
        workbook = Workbook()
        names = list(sheets) or ["Sheet1"]
        workbook.active.title = names[0]
        for name in names[1:]:
            workbook.create_sheet(title=name)
        workbook.save(path)
        return cls(path)

    @property
    def loaded(self) -> bool:
        return self.workbook is not None

    @property
    def sheet_names(self) -> List[str]:
        return list(self.workbook.sheetnames) if self.workbook is not None else []

    def load(self, path: Optional[str] = None) -> bool:
        """
        Load the workbook, replacing any previously loaded one.

        Args:
            path: Path to load from; defaults to the session path

        Returns:
            bool: True if the workbook was loaded
        """
        if path is not None:
            self.path = path
        self.workbook = None
        try:
            self.workbook = load_workbook(self.path)
            return True
        except Exception:
            logger.exception("Error loading Excel workbook: %s", self.path)
            return False

    def get(self, sheet: str, row: int, col: int) -> Optional[str]:
        """
        Get the string value of a cell.

        A cell written as "" reads back as ""; a cell that was never written
        counts as missing.

        Returns:
            str: The cell value, or None if the sheet, row or cell is missing
        """
        try:
            worksheet = self._sheet(sheet)
            self._check_indices(row, col)
            if row >= worksheet.max_row or col >= worksheet.max_column:
                raise IndexError(f"Cell ({row}, {col}) is outside the used range of {sheet!r}")
            cell = worksheet.cell(row=row + 1, column=col + 1)
            if cell.value is None:
                if cell.data_type in _TEXT_TYPES:
                    return ""
                raise LookupError(f"Cell ({row}, {col}) of {sheet!r} is empty")
            if cell.data_type == "s" and isinstance(cell.value, str):
                return unescape(cell.value)
            return str(cell.value)
        except Exception:
            logger.exception("Error getting cell value: %s[%s, %s]", sheet, row, col)
            return None

    def set(self, sheet: str, row: int, col: int, value: str) -> bool:
        """
        Write a string into a cell and save the whole workbook.

        The value is always stored as literal text: "=1+1" is not a formula
        and "#N/A" is not an error. None clears the cell.

        Returns:
            bool: True if the value was written and saved
        """
        try:
            worksheet = self._sheet(sheet)
            self._check_indices(row, col)
            cell = worksheet.cell(row=row + 1, column=col + 1)
            if value is None:
                cell.value = None
            else:
                cell.value = _encode_text(str(value))
                cell.data_type = "s"
            self.workbook.save(self.path)
            return True
        except Exception:
            logger.exception("Error setting cell value: %s[%s, %s]", sheet, row, col)
            return False

    def _sheet(self, name: str):
        if self.workbook is None:
            raise RuntimeError(f"Workbook not loaded: {self.path}")
        if name not in self.workbook.sheetnames:
            raise KeyError(f"Sheet {name!r} not found in {os.path.basename(self.path)}")
        return self.workbook[name]

    @staticmethod
    def _check_indices(row: int, col: int) -> None:
        if row < 0 or col < 0:
            raise IndexError(f"Negative cell index ({row}, {col})")
