"""CLI entry point: python -m ancestry_map.cli {render,export}"""

import argparse
import sys
from pathlib import Path

import structlog

from ancestry_map.config.pipeline import PipelineConfig, load_pipeline_config
from ancestry_map.config.settings import get_settings, load_default_data
from ancestry_map.errors import PipelineError
from ancestry_map.logging_config import configure_logging
from ancestry_map.pipeline import run_pipeline
from ancestry_map.presentation import MapPayload, build_map_payload
from ancestry_map.presentation.folium_map import save_map


def build_payload(input_path: Path | None, config: PipelineConfig) -> MapPayload:
    """Run the pipeline on ``input_path`` (or the bundled sample data)."""
    if input_path is None:
        text = load_default_data()
    else:
        text = input_path.read_text(encoding="utf-8")
    result = run_pipeline(text, config)
    return build_map_payload(result.markers, result.edges, config)


def run_render(input_path: Path | None, output_path: Path, config: PipelineConfig) -> None:
    """Write an HTML map for the dataset."""
    payload = build_payload(input_path, config)
    save_map(payload, output_path, config.map)


def run_export(input_path: Path | None, output_path: Path | None, config: PipelineConfig) -> None:
    """Write the render payload as JSON to ``output_path`` or stdout."""
    log = structlog.get_logger()
    payload = build_payload(input_path, config)
    content = payload.model_dump_json(indent=2)

    if output_path is None:
        sys.stdout.write(content + "\n")
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    log.info(
        "payload_written",
        path=str(output_path),
        markers=len(payload.markers),
        edges=len(payload.edges),
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="ancestry_map.cli",
        description="Ancestry Map CLI",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Pipeline YAML config (default: $ANCESTRY_MAP_PIPELINE_CONFIG_PATH or config/pipeline.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render the dataset as an HTML map")
    render_parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Tab/comma-delimited data file (default: bundled sample data)",
    )
    render_parser.add_argument(
        "--output",
        type=str,
        default="./map.html",
        help="Output HTML file (default: ./map.html)",
    )

    export_parser = subparsers.add_parser("export", help="Export markers and edges as JSON")
    export_parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Tab/comma-delimited data file (default: bundled sample data)",
    )
    export_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file (default: stdout)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    settings = get_settings()
    configure_logging(json_output=settings.log_json, log_level=settings.log_level)
    log = structlog.get_logger()

    config_path = Path(args.config) if args.config else settings.pipeline_config_path
    config = load_pipeline_config(config_path)
    input_path = Path(args.input) if args.input else None

    try:
        if args.command == "render":
            run_render(input_path, Path(args.output), config)
        elif args.command == "export":
            run_export(input_path, Path(args.output) if args.output else None, config)
    except PipelineError as e:
        for row_error in e.row_errors:
            log.error("row_rejected", row_index=row_error.row_index, reason=row_error.reason)
        log.error("load_failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
