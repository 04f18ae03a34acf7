"""Render result posters from a JSON results file.

Usage:
    python scripts/render_poster.py sample_results.json result-1
    python scripts/render_poster.py sample_results.json result-1 -t neon -o posters/
    python scripts/render_poster.py sample_results.json --all -t classic
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from festival.log import setup_logging
from festival.posters import get_all_templates
from festival.posters.renderer import poster_filename, render_poster
from festival.sources.json_file import JsonFileResultSource


def main():
    template_ids = [t.template_id for t in get_all_templates()]

    parser = argparse.ArgumentParser(description="Render result posters")
    parser.add_argument("results_file", type=Path, help="JSON results file")
    parser.add_argument("result_id", nargs="?", help="Id of the result to render")
    parser.add_argument("--all", action="store_true", help="Render every result")
    parser.add_argument(
        "-t", "--template", default="modern", choices=template_ids,
        help="Poster template (default: modern)",
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=Path("."),
        help="Directory to write posters into (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    if not args.all and not args.result_id:
        parser.error("give a result_id or --all")

    setup_logging("DEBUG" if args.verbose else "INFO")

    results = JsonFileResultSource(args.results_file).fetch()
    if not args.all:
        results = [r for r in results if r.id == args.result_id]
        if not results:
            parser.error(f"no result with id {args.result_id!r} in {args.results_file}")

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for result in results:
        path = args.output_dir / poster_filename(result)
        path.write_bytes(render_poster(result, args.template))
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
