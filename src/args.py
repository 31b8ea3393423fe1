"""Argument parsing functionality for depresolve."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="depresolve",
        description=(
            "depresolve - Dependency manifest resolver with platform (BOM) version inheritance"
        ),
        add_help=True,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("-m", "--manifest",
                        dest="MANIFEST",
                        help="Manifest file to resolve (YAML, YML, or JSON)",
                        action="store", type=str)
    input_group.add_argument("-g", "--gradle",
                        dest="GRADLE",
                        help=f"Gradle Kotlin build script to resolve (e.g. {Constants.GRADLE_KTS_FILE})",
                        action="store", type=str)

    parser.add_argument("--catalog",
                        dest="CATALOG",
                        help=f"Version catalog for libs.* accessors (e.g. {Constants.VERSION_CATALOG_FILE})",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML) with platform version tables",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: DEPRESOLVE_LOG_LEVEL or INFO)",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not print resolved dependencies to the console.",
                        action="store_true")

    return parser.parse_args(argv)
