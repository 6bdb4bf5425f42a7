"""
Scenario CSV Parser (Raw Input -> Scenario objects).

CSV Format:
    name, kind, start, end

    - kind is "range" or "index"
    - range rows: blank start/end mean an open end (prefix/suffix)
    - index rows: start holds the index, end is ignored

Example:
    name,kind,start,end
    overlong,range,0,5
    before_start,range,-1,2
    past_end,index,3,
"""

import csv
import os
import warnings
from dataclasses import dataclass
from io import StringIO
from typing import List, Optional

from slicebound.ranges import SliceRange
from slicebound.report import Scenario


class ScenarioParseError(Exception):
    """Raised when scenario CSV parsing fails."""
    pass


@dataclass
class ScenarioRow:
    """Parsed CSV row."""
    name: str
    kind: str
    start: Optional[int] = None
    end: Optional[int] = None


def _parse_int(cell: Optional[str]) -> Optional[int]:
    if cell is None or not cell.strip():
        return None
    return int(cell.strip())


def _parse_rows(csv_content: str) -> List[ScenarioRow]:
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        raise ScenarioParseError("CSV is empty")

    fieldnames = [name.strip() for name in reader.fieldnames]
    required_columns = ['name', 'kind', 'start']
    missing = [col for col in required_columns if col not in fieldnames]
    if missing:
        raise ScenarioParseError(f"Missing required columns: {missing}")
    reader.fieldnames = fieldnames

    rows = []
    for row_num, row in enumerate(reader, start=2):  # header is line 1
        try:
            rows.append(ScenarioRow(
                name=(row.get('name') or '').strip(),
                kind=(row.get('kind') or '').strip().lower(),
                start=_parse_int(row.get('start')),
                end=_parse_int(row.get('end')),
            ))
        except (ValueError, KeyError) as e:
            raise ScenarioParseError(f"Error parsing row {row_num}: {str(e)}")

    return rows


def parse_scenarios_string(csv_content: str) -> List[Scenario]:
    """
    Parse CSV content into Scenario objects.

    Rows of an unknown kind are skipped with a UserWarning.

    Raises:
        ScenarioParseError: On missing columns, bad integers, duplicate names
            or an index row without an index
    """
    rows = _parse_rows(csv_content)

    names = [row.name for row in rows]
    if len(names) != len(set(names)):
        duplicates = {name for name in names if names.count(name) > 1}
        raise ScenarioParseError(f"Duplicate scenario names: {duplicates}")

    scenarios = []
    for row in rows:
        if row.kind == 'range':
            scenarios.append(Scenario(name=row.name, target=SliceRange(row.start, row.end)))
        elif row.kind == 'index':
            if row.start is None:
                raise ScenarioParseError(f"Index scenario {row.name!r} has no index")
            scenarios.append(Scenario(name=row.name, target=row.start))
        else:
            warnings.warn(f"Unknown scenario kind for {row.name}: {row.kind!r}", UserWarning)

    return scenarios


def parse_scenarios_file(filepath: str) -> List[Scenario]:
    """
    Parse a scenario CSV file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ScenarioParseError: If parsing fails
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Scenario file not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        content = f.read()

    return parse_scenarios_string(content)


__all__ = [
    "parse_scenarios_string",
    "parse_scenarios_file",
    "ScenarioParseError",
]
