"""depresolve - Dependency manifest resolver

    Reads a manifest (YAML/JSON document or Gradle Kotlin build script),
    applies platform (BOM) version inheritance and prints/exports the
    resolved dependency list.

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from config import load_config
from constants import ExitCodes
from manifest.catalog import load_catalog
from manifest.errors import ManifestError, ResolutionError
from manifest.export import export_csv, export_json, to_dicts
from manifest.gradle import load_build_script
from manifest.loader import load_manifest
from manifest.resolver import resolve

logger = logging.getLogger(__name__)


def _setup_logging(args):
    """Configure logging based on CLI arguments.

    Returns:
        The FileHandler installed for --logfile, or None.
    """
    configure_logging(getattr(args, "LOG_LEVEL", None))

    log_file = getattr(args, "LOG_FILE", None)
    if not log_file:
        return None
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    file_handler.setFormatter(formatter)
    logging.getLogger().addHandler(file_handler)
    logger.info("Logging to file: %s", log_file)
    return file_handler


def load_entries(args, cfg):
    """Load manifest entries from the input selected on the command line.

    Raises:
        ManifestError: input could not be read or parsed.
    """
    if getattr(args, "GRADLE", None):
        catalog = load_catalog(args.CATALOG) if getattr(args, "CATALOG", None) else None
        return load_build_script(args.GRADLE, catalog, cfg.configurations, cfg.platforms)
    return load_manifest(args.MANIFEST, cfg.platforms)


def output_format(args):
    """Pick the export format from --format, then the --output extension."""
    if getattr(args, "OUTPUT_FORMAT", None):
        return args.OUTPUT_FORMAT.lower()
    if str(args.OUTPUT).lower().endswith(".csv"):
        return "csv"
    return "json"


def run(args):
    """Load, resolve, print and export; exits with the matching ExitCodes value."""
    cfg = load_config(getattr(args, "CONFIG", None))

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        entries = load_entries(args, cfg)
    except ManifestError as e:
        logging.error("Couldn't load manifest: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    try:
        records = resolve(entries)
    except ResolutionError as e:
        logging.error("Dependency resolution failed: %s", e)
        sys.exit(ExitCodes.RESOLUTION_ERROR.value)

    logging.info("Resolved %d dependencies.", len(records))
    if not args.QUIET:
        for d in to_dicts(records):
            print(f"{d['coordinate']}:{d['version']}  {d['role']}")

    if getattr(args, "OUTPUT", None):
        if output_format(args) == "csv":
            export_csv(records, args.OUTPUT)
        else:
            export_json(records, args.OUTPUT)

    sys.exit(ExitCodes.SUCCESS.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    file_handler = _setup_logging(args)
    try:
        run(args)
    finally:
        if file_handler is not None:
            logging.getLogger().removeHandler(file_handler)
            file_handler.close()

if __name__ == "__main__":
    main()
