# manifest/listing.py
import logging
import os
import re
from typing import List, Tuple

import pandas as pd

from manifest.composers import get_composer
from utils.path import csv_path_for

log = logging.getLogger(__name__)

PERFORMER_RE = re.compile(r"(?:^|/)([a-zA-Z]+)[^/]+$")


def read_manifest(path: str) -> pd.DataFrame:
    # keep every cell a string; empty cells stay ""
    return pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)


def to_name_case(name: str) -> str:
    """'ALLCAPS' -> 'Allcaps'; anything else is returned as is."""
    if re.fullmatch(r"[A-Z]+", name):
        return name[0] + name[1:].lower()
    return name


def performer_of(midi_performance: str) -> str:
    m = PERFORMER_RE.search(midi_performance.replace("\\", "/"))
    if m is None:
        raise ValueError(f"No performer in performance path: {midi_performance!r}")
    return to_name_case(m.group(1))


def midi_file_list(df: pd.DataFrame,
                   performance_column: str = "midi_performance",
                   score_column: str = "midi_score") -> List[str]:
    """Every performance, plus each score once (scores are shared between rows)."""
    out: List[str] = []
    for _, row in df.iterrows():
        out.append(row[performance_column])
        if row[score_column] not in out:
            out.append(row[score_column])
    return out


def conversion_jobs(midi_paths: List[str], root: str) -> List[Tuple[str, str]]:
    jobs = []
    for rel in midi_paths:
        src = os.path.join(root, rel)
        jobs.append((src, csv_path_for(src)))
    return jobs


def _set_column(df: pd.DataFrame, name: str, values, after: str = None) -> None:
    if name in df.columns:
        df[name] = values
    elif after is not None and after in df.columns:
        df.insert(df.columns.get_loc(after) + 1, name, values)
    else:
        df[name] = values


def enrich_manifest(df: pd.DataFrame,
                    performance_column: str = "midi_performance",
                    score_column: str = "midi_score") -> pd.DataFrame:
    """Add composer years, performer and CSV paths. Unknown composer raises."""
    df = df.copy()
    composers = [get_composer(name) for name in df["composer"]]
    _set_column(df, "year_born", [c.year_born for c in composers], after="composer")
    _set_column(df, "year_died", [c.year_died for c in composers], after="year_born")
    _set_column(df, "performer", [performer_of(p) for p in df[performance_column]], after=score_column)
    _set_column(df, "csv_score", [csv_path_for(p) for p in df[score_column]])
    _set_column(df, "csv_performance", [csv_path_for(p) for p in df[performance_column]])
    return df


def update_manifest(path: str,
                    performance_column: str = "midi_performance",
                    score_column: str = "midi_score") -> pd.DataFrame:
    df = enrich_manifest(read_manifest(path), performance_column, score_column)
    df.to_csv(path, index=False)
    log.info("updated manifest %s (%d rows)", path, len(df))
    return df
