"""Export resolved dependencies to JSON or CSV."""

import csv
import json
import logging
import sys
from typing import Any, Dict, Iterable, List

from constants import ExitCodes

from .models import ResolvedDependency

FIELDS = ["group", "artifact", "coordinate", "version", "role"]


def to_dicts(records: Iterable[ResolvedDependency]) -> List[Dict[str, Any]]:
    """Serialize resolved records to plain dicts (keys in FIELDS order)."""
    return [
        {
            "group": r.coordinate.group,
            "artifact": r.coordinate.artifact,
            "coordinate": r.coordinate.key,
            "version": r.version,
            "role": r.role.value,
        }
        for r in records
    ]


def export_json(records, path):
    """Exports the resolved dependencies to a JSON file.

    Args:
        records (list): Resolved dependencies.
        path (str): File path to export the JSON.
    """
    try:
        with open(path, "w", encoding="utf-8") as file:
            json.dump(to_dicts(records), file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_csv(records, path):
    """Exports the resolved dependencies to a CSV file.

    Args:
        records (list): Resolved dependencies.
        path (str): File path to export the CSV.
    """
    rows = [FIELDS] + [[d[k] for k in FIELDS] for d in to_dicts(records)]
    try:
        with open(path, "w", newline="", encoding="utf-8") as file:
            export = csv.writer(file)
            export.writerows(rows)
        logging.info("CSV file has been successfully exported at: %s", path)
    except (OSError, csv.Error) as e:
        logging.error("CSV file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
