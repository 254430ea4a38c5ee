"""
CSV Writer
Serializes product records with a fixed column layout and writes them to a
dated file in the output folder
"""

import csv
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from .clock import FILE_DATE_FORMAT, now
from .models import COLUMNS, ProductRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_directory(path: PathLike) -> Path:
    """Create a directory (and parents) if it doesn't exist"""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_directories(paths: Iterable[PathLike]) -> List[Path]:
    """ensure_directory() for several paths"""
    return [ensure_directory(p) for p in paths]


def _format_field(value: str, quote_empty: bool) -> str:
    # The csv module writes a lone empty field as "" and quotes everything
    # else only when needed, so format field by field
    if value == '' and not quote_empty:
        return ''
    buf = io.StringIO()
    # before 3.12 a field is quoted for \r or \n only if the terminator has it
    csv.writer(buf, lineterminator='\r\n').writerow([value])
    return buf.getvalue()[:-2]


def _format_row(values: List[str], quote_empty: bool) -> str:
    return ','.join(_format_field(v, quote_empty) for v in values) + '\n'


def generate_csv(
    records: Iterable[ProductRecord],
    columns: Optional[Mapping[str, str]] = None,
    header: bool = True,
    quote_empty: bool = True
) -> str:
    """
    Serialize records to CSV text

    Args:
        records: Records in output order
        columns: Record key -> header label, in column order
        header: Write the header row
        quote_empty: Write empty fields as ""

    Returns:
        CSV text, one '\\n'-terminated line per row
    """
    columns = columns or COLUMNS
    keys = list(columns.keys())

    lines = []
    if header:
        lines.append(_format_row([columns[k] for k in keys], quote_empty))

    for record in records:
        data = record.to_dict()
        lines.append(_format_row(['' if data[k] is None else str(data[k]) for k in keys], quote_empty))

    return ''.join(lines)


def csv_file_name(today: Optional[datetime] = None) -> str:
    """Current date as YYYY-MM-DD.csv"""
    return f"{now(FILE_DATE_FORMAT, today)}.csv"


def write_csv(folder: PathLike, csv_text: str, today: Optional[datetime] = None) -> Path:
    """
    Write CSV text to <folder>/<YYYY-MM-DD>.csv, overwriting any existing file

    Returns:
        Path of the written file
    """
    output_path = Path(folder) / csv_file_name(today)

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(csv_text)

    logger.info(f" Saved to {output_path} (CSV)")
    return output_path
