"""
CLI entrypoint: load a self map (sample, JSON file or AI generation), resolve the view
and write an interactive HTML preview plus an optional CSV table.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from dotenv import load_dotenv

from .config import ViewConfig, load_config
from .errors import SelfMapError
from .frames import build_view_frame, category_summary
from .generator import SelfMapGenerator
from .models import RADIUS_MODES, SIZE_METRICS
from .renderer import render_html
from .store import SelfMapStore
from .validation import STRICT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a self map as an interactive HTML page")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, default=None, help="Self map JSON file")
    source.add_argument("--prompt", type=str, default=None, help="Free text to generate a self map from")
    parser.add_argument("--config", type=str, default=None, help="Path to config.yaml (optional)")
    parser.add_argument("--size-metric", choices=SIZE_METRICS, default=None)
    parser.add_argument("--radius-mode", choices=RADIUS_MODES, default=None)
    parser.add_argument("--scale", type=float, default=None, help="Marker size multiplier")
    parser.add_argument("--opacity", type=float, default=None)
    parser.add_argument("--no-edges", action="store_true")
    parser.add_argument("--no-labels", action="store_true")
    parser.add_argument("--strict", action="store_true", help="Reject associations to unknown entries")
    parser.add_argument("--out", type=str, default=None, help="Output HTML path")
    parser.add_argument("--csv", type=str, default=None, help="Also write the resolved view table")
    parser.add_argument("--verbose", action="store_true")
    return parser


def apply_overrides(config: ViewConfig, args: argparse.Namespace) -> ViewConfig:
    if args.input:
        config.input_path = args.input
    if args.size_metric:
        config.size_metric = args.size_metric
    if args.radius_mode:
        config.radius_mode = args.radius_mode
    if args.scale is not None:
        config.size_scale = args.scale
    if args.opacity is not None:
        config.opacity = args.opacity
    if args.no_edges:
        config.show_edges = False
    if args.no_labels:
        config.show_labels = False
    if args.strict:
        config.dangling_policy = STRICT
    if args.out:
        config.output_html = args.out
    if args.csv:
        config.output_csv = args.csv
    return config


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = apply_overrides(load_config(args.config), args)
        store = SelfMapStore(dangling_policy=config.dangling_policy)
        if args.prompt:
            print("Generating self map from prompt...")
            store.generate(args.prompt, SelfMapGenerator(dangling_policy=config.dangling_policy))
        elif config.input_path:
            store.load_file(config.input_path)
    except (SelfMapError, FileNotFoundError) as exc:
        print(f"Error: {exc}")
        return 1

    data = store.data
    frame = build_view_frame(data, config)
    print(f"Self Map - {len(data.entries)} entries, {len(data.associations)} associations")
    if not frame.empty:
        print(category_summary(frame).to_string(index=False))

    out_path = render_html(data, config, config.output_html)
    print(f"Wrote {out_path}")
    if config.output_csv:
        frame.to_csv(config.output_csv, index=False)
        print(f"Wrote {config.output_csv}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
