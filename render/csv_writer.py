# render/csv_writer.py
import logging
from typing import Dict, List

from render.rows import WIDE, to_frame

log = logging.getLogger(__name__)


def write_rows(path: str, rows: List[Dict[str, object]], layout: str = WIDE) -> str:
    """Write rows as CSV with a header line; empty cells for missing values."""
    df = to_frame(rows, layout)
    df.to_csv(path, index=False)
    log.debug("wrote %d rows to %s", len(df), path)
    return path
