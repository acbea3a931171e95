# utils/path.py
import os
import re
from typing import Optional

MIDI_SUFFIX = re.compile(r"\.midi?$", re.IGNORECASE)


def csv_path_for(midi_path: str) -> str:
    """
    a/b/Shi05M.mid -> a/b/Shi05M.csv
    Non-MIDI names just get .csv appended.
    """
    if MIDI_SUFFIX.search(midi_path):
        return MIDI_SUFFIX.sub(".csv", midi_path)
    return midi_path + ".csv"


def manifest_root(manifest_path: str, root: Optional[str] = None) -> str:
    """Dataset root the manifest's relative paths hang off; defaults to the manifest's folder."""
    if root:
        return root
    return os.path.dirname(os.path.abspath(manifest_path))
