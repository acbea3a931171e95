# app.py
import logging
from typing import Dict, List, Optional, TextIO

from config import AppConfig
from manifest.listing import conversion_jobs, midi_file_list, read_manifest, update_manifest
from midi.parser import dump_midi, read_tracks
from render.csv_writer import write_rows
from render.rows import rectanglify
from timeline.pipeline import PipelineResult, build_events
from utils.path import manifest_root

log = logging.getLogger(__name__)


class App:
    def __init__(self, cfg: Optional[AppConfig] = None):
        self.cfg = cfg or AppConfig()

    # ---------- Single file ----------
    def events_for(self, path_midi: str) -> PipelineResult:
        tracks, tpb = read_tracks(path_midi)
        result = build_events(tracks, tpb)
        for c in result.conditions:
            log.warning("%s: %s", path_midi, c.message)
        return result

    def rows_for(self, path_midi: str) -> List[Dict[str, object]]:
        conv = self.cfg.convert
        return rectanglify(self.events_for(path_midi).events, conv.layout, conv.density_precision)

    def convert_file(self, path_midi: str, path_csv: str) -> str:
        rows = self.rows_for(path_midi)
        return write_rows(path_csv, rows, self.cfg.convert.layout)

    # ---------- Manifest ----------
    def run_manifest(self, path_manifest: str) -> List[str]:
        """Convert every file the manifest lists, in order, then enrich the manifest.

        The first failure stops the batch; files after it are not touched.
        """
        mcfg = self.cfg.manifest
        df = read_manifest(path_manifest)
        paths = midi_file_list(df, mcfg.performance_column, mcfg.score_column)
        root = manifest_root(path_manifest, mcfg.root)
        written = []
        for src, dst in conversion_jobs(paths, root):
            log.info("processing: %s -> %s", src, dst)
            written.append(self.convert_file(src, dst))
        update_manifest(path_manifest, mcfg.performance_column, mcfg.score_column)
        return written

    # ---------- Diagnostics ----------
    def dump(self, path_midi: str, out: Optional[TextIO] = None):
        dump_midi(path_midi, out)
