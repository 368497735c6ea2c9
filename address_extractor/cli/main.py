from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, load_config
from ..detection.registry import PLATFORM_REGISTRY, get_platform_pattern
from ..detection.scored import analyze_file_structure
from ..detection.strategy import get_resolver
from ..logging.init import log_summary, setup_logging
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..services.export import write_addresses_csv
from ..services.orchestrator import ProcessingError, collect_input_files, process_all, read_export_text
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then the optional YAML config
- Resolve input files (explicit files, or directories scanned for exports)
- Run the extraction on each file, optionally export all addresses as CSV
- Print a SUMMARY line and exit with a status reflecting failed files
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

REGISTERED_PLATFORMS = frozenset(p.id for p in PLATFORM_REGISTRY)

CONFIG_ENV_VAR = "ADDRESS_EXTRACTOR_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (existing variables win by default)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="address-extractor",
        description="Extract postal addresses from e-commerce order exports",
    )
    p.add_argument("paths", nargs="*", type=Path, help="Export files or directories (default: .)")
    p.add_argument("--legacy-amazon", action="store_true", help="Parse as Amazon Seller fixed-column report")
    p.add_argument(
        "--strategy",
        choices=("priority", "scored"),
        default="priority",
        help="Column resolution strategy for the universal parser",
    )
    p.add_argument("--output", type=Path, help="Write all extracted addresses to this CSV file")
    p.add_argument("--inspect", action="store_true", help="Print detected file structure then exit")
    p.add_argument("--config", type=Path, help=f"YAML config file (default: ${CONFIG_ENV_VAR})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ExtractorConfig:
    config_path = args.config
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
    if config_path is None:
        return DEFAULT_CONFIG
    return load_config(config_path)


def _inspect_files(paths: list[Path], cfg: ExtractorConfig) -> int:
    files = collect_input_files(paths, cfg.accepted_extensions)
    if not files:
        print("inspect: no export files")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            content = read_export_text(f)
        except OSError as e:
            print(f"  read_error: {e}")
            continue
        detection = analyze_file_structure(content, cfg)
        print(
            f"  separator={detection.separator!r} platform={detection.platform.value} "
            f"confidence={detection.confidence:.0f} has_headers={detection.has_headers}"
        )
        print(f"  mapping={detection.mapping.as_dict()}")
        if detection.platform in REGISTERED_PLATFORMS:
            pattern = get_platform_pattern(detection.platform)
            print(f"  pattern={pattern.name} base_confidence={pattern.base_confidence}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # argv=[] must not fall back to sys.argv (pytest flags would leak in)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        setup_logging(debug=True)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    paths = args.paths or [Path(".")]

    try:
        if args.inspect:
            return _inspect_files(paths, cfg)
        resolver = get_resolver(args.strategy, cfg)
        result = process_all(paths, cfg, legacy_amazon=args.legacy_amazon, resolver=resolver)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    if args.output is not None:
        try:
            written = write_addresses_csv(result.addresses, args.output)
        except OSError as e:
            logger.error(f"export: {e}")
            return EXIT_FATAL
        logger.info(f"exported {len(result.addresses)} addresses to {written}")

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


__all__ = ["main"]
