# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # 確保能找到 config.py

import argparse
import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from config import AppConfig, ConvertConfig, ManifestConfig, LogConfig
from app import App
from render.rows import LAYOUTS
from utils.crashlog import log_dir, log_exception

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _init_logging(cfg: LogConfig):
    root = logging.getLogger()
    if root.handlers:
        return

    logging.basicConfig(level=cfg.level, format=FORMAT)
    try:
        fh = RotatingFileHandler(os.path.join(log_dir(), "app.log"), maxBytes=cfg.max_bytes,
                                 backupCount=cfg.backup_count, encoding="utf-8")
    except OSError as e:
        logging.warning("file logging disabled: %s", e)
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(fh)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="midi-rect", description="MIDI -> analysis-ready CSV")
    ap.add_argument('--verbose', action='store_true', help="debug logging")
    sub = ap.add_subparsers(dest='command', required=True)

    f = sub.add_parser('file', help="MIDI file -> CSV file")
    f.add_argument('path_midi', help="Path to the source MIDI file")
    f.add_argument('path_csv', help="Path to the target output file")
    f.add_argument('--layout', default='wide', choices=LAYOUTS)

    ls = sub.add_parser('list', help="CSV manifest -> CSV files")
    ls.add_argument('path_manifest', help="Path to the source manifest file")
    ls.add_argument('--root', default=None, help="dataset root (default: manifest folder)")
    ls.add_argument('--layout', default='wide', choices=LAYOUTS)

    d = sub.add_parser('dump', help="Dump a MIDI file")
    d.add_argument('path_midi', help="Path to the MIDI file")
    return ap


def config_from_args(args) -> AppConfig:
    return AppConfig(
        convert=ConvertConfig(layout=getattr(args, 'layout', 'wide')),
        manifest=ManifestConfig(root=getattr(args, 'root', None)),
        log=LogConfig(level="DEBUG" if args.verbose else "INFO"),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)
    _init_logging(cfg.log)

    app = App(cfg)
    try:
        if args.command == 'file':
            app.convert_file(args.path_midi, args.path_csv)
        elif args.command == 'list':
            app.run_manifest(args.path_manifest)
        elif args.command == 'dump':
            app.dump(args.path_midi)
    except Exception as e:
        logging.error("未捕捉的例外：%s", e, exc_info=True)
        try:
            log_exception(args.command, e)
        except OSError:
            pass
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
