from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from ..detection.strategy import ColumnResolver
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.address import Address, ParsedAddresses
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..models.processing_result import BatchResult, FileStat
from ..models.source_file import FileStatus, SourceFile
from .amazon import parse_amazon_report_with_detection
from .assembler import renumber_addresses
from .progress import ProgressTracker
from .universal import parse_universal_file

"""Batch orchestration over export files.

The engine works on in-memory strings; this module is the collaborator
that finds export files, decodes them and hands their text to the
engine, one file at a time, then aggregates the outcome:

1. Resolve the input paths (files, or directories scanned non-recursively)
2. Decode each file and run the universal (or legacy Amazon) parser
3. Buffer row errors into the JSON Lines error log
4. Return a BatchResult with per-file stats and all extracted addresses
"""

logger = logging.getLogger(__name__)

FALLBACK_ENCODING = "latin-1"

# FileStat.platform when --legacy-amazon fell back to the fixed-column reader
FIXED_COLUMNS_PLATFORM = "AMAZON_SELLER_FIXED"


class ProcessingError(Exception):
    """Fatal batch error (missing input path, unreadable directory)."""


def scan_export_files(directory: Path, extensions: Iterable[str]) -> list[Path]:
    """Scan directory for export files (non-recursive), sorted by name.

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    wanted = {ext.lower() for ext in extensions}
    try:
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in wanted)
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def collect_input_files(paths: Iterable[Path], extensions: Iterable[str]) -> list[Path]:
    """Expand directories and keep explicit files as given.

    Explicit files are accepted whatever their extension; only directory
    scans filter on extensions.
    """
    extensions = tuple(extensions)
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(scan_export_files(path, extensions))
        elif path.is_file():
            files.append(path)
        else:
            raise ProcessingError(f"Input not found: {path}")
    return files


def read_export_text(path: Path) -> str:
    """Decode an export file; UTF-8 (BOM tolerated) first, then latin-1."""
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("file=%s not utf-8, decoding as %s", path.name, FALLBACK_ENCODING)
        return raw.decode(FALLBACK_ENCODING)


def process_all(
    paths: Iterable[Path],
    config: ExtractorConfig = DEFAULT_CONFIG,
    *,
    legacy_amazon: bool = False,
    resolver: ColumnResolver | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> BatchResult:
    """Process every export file found under paths.

    Args:
        paths: files and/or directories
        config: extraction tunables
        legacy_amazon: use the Amazon entry point (scored detection with
            fixed-column fallback) instead of the universal parser
        resolver: column strategy for the universal parser
        error_log: buffer receiving one record per error; flushed at the end

    Returns:
        BatchResult with aggregated metrics, file stats and addresses

    Raises:
        ProcessingError: For fatal errors that prevent processing
    """
    start_time = datetime.now(UTC)
    if error_log is None:
        error_log = ErrorLogBuffer()

    file_paths = collect_input_files(paths, config.accepted_extensions)

    file_stats: list[FileStat] = []
    addresses: list[Address] = []
    total_errors = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            source = _process_single_file(file_path, config, legacy_amazon, resolver, error_log)

            if source.result is not None:
                # per-file ids restart at 1; the batch list gets its own numbering
                addresses.extend(renumber_addresses(source.result.addresses, len(addresses) + 1))
            total_errors += source.error_count
            progress.finish_file(source.status == FileStatus.SUCCESS, source.address_count)

            elapsed = (
                (source.end_time - source.start_time).total_seconds()
                if source.start_time and source.end_time
                else 0.0
            )
            file_stats.append(
                FileStat(
                    file_name=source.name,
                    status=source.status.value,
                    addresses=source.address_count,
                    errors=source.error_count,
                    platform=source.platform,
                    confidence=source.confidence,
                    elapsed_seconds=elapsed,
                )
            )

    try:
        log_path = error_log.flush()
        if log_path is not None:
            logger.info("error log written: %s", log_path)
    except OSError as e:
        # a failing error log must not fail the whole run
        logger.warning("could not write error log: %s", e)

    end_time = datetime.now(UTC)
    return BatchResult(
        success_files=progress.succeeded,
        failed_files=progress.failed,
        total_addresses=len(addresses),
        total_errors=total_errors,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
        addresses=addresses,
    )


def _parse_content(
    content: str,
    config: ExtractorConfig,
    legacy_amazon: bool,
    resolver: ColumnResolver | None,
) -> tuple[ParsedAddresses, str, float]:
    if legacy_amazon:
        parsed, detection = parse_amazon_report_with_detection(content, config)
        if detection is None:
            return parsed, FIXED_COLUMNS_PLATFORM, 0.0
        return parsed, detection.platform.value, detection.confidence
    result = parse_universal_file(content, config, resolver)
    return result, result.platform.value, result.confidence


def _process_single_file(
    file_path: Path,
    config: ExtractorConfig,
    legacy_amazon: bool,
    resolver: ColumnResolver | None,
    error_log: ErrorLogBuffer,
) -> SourceFile:
    """Read and parse one export file.

    A file counts as successful when at least one address came out of it;
    row errors are logged but do not fail the file.
    """
    start_time = datetime.now(UTC)
    try:
        content = read_export_text(file_path)
    except OSError as e:
        error_log.append(ErrorRecord.create(file_path.name, -1, "FILE_READ_ERROR", str(e)))
        logger.error("file=%s unreadable: %s", file_path.name, e)
        return SourceFile(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            error=f"read failed: {e}",
        )

    result, platform, confidence = _parse_content(content, config, legacy_amazon, resolver)
    error_log.extend_from_messages(file_path.name, result.errors)
    for message in result.errors:
        logger.warning("file=%s %s", file_path.name, message)

    status = FileStatus.SUCCESS if result.addresses else FileStatus.FAILED
    logger.info(
        "file=%s platform=%s confidence=%.0f addresses=%d errors=%d",
        file_path.name,
        platform,
        confidence,
        len(result.addresses),
        len(result.errors),
    )
    return SourceFile(
        path=file_path,
        name=file_path.name,
        result=result,
        platform=platform,
        confidence=confidence,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=status,
        error=None if result.addresses else "no address extracted",
    )
