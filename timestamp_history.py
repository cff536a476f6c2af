"""History of timestamp conversions, kept in a JSON file."""

import json
import logging
import os
import uuid
from datetime import datetime, timezone


logger = logging.getLogger(__name__)

HISTORY_FILE = "timestamp_history.json"


def load_history(path=None):
    path = path or HISTORY_FILE
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as file_obj:
            data = json.load(file_obj)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load timestamp history from %s: %s", path, exc)
        return []
    if not isinstance(data, list):
        logger.warning("Timestamp history in %s is not a list, ignoring it", path)
        return []
    return [entry for entry in data if isinstance(entry, dict)]


def save_history(entries, path=None):
    with open(path or HISTORY_FILE, "w", encoding="utf-8") as file_obj:
        json.dump(entries, file_obj, indent=2, ensure_ascii=False)


def sorted_history(entries):
    return sorted(entries, key=lambda entry: entry.get("create_time", ""), reverse=True)


def add_history_entry(timestamp, is_milliseconds, converted_time, path=None):
    """Append a conversion to the history.

    Returns the stored entry, or ``None`` when there is nothing to store or
    the same timestamp was already recorded with the same unit.
    """
    if not timestamp or not converted_time:
        return None

    entries = load_history(path)
    for entry in entries:
        if entry.get("timestamp") == timestamp and entry.get("is_milliseconds") == is_milliseconds:
            return None

    entry = {
        "id": uuid.uuid4().hex,
        "timestamp": timestamp,
        "is_milliseconds": bool(is_milliseconds),
        "converted_time": converted_time,
        "create_time": datetime.now(timezone.utc).isoformat(timespec="microseconds"),
    }
    entries.append(entry)
    save_history(entries, path)
    logger.info("Saved timestamp %s to history", timestamp)
    return entry


def delete_history_entry(entry_id, path=None):
    entries = load_history(path)
    remaining = [entry for entry in entries if entry.get("id") != entry_id]
    if len(remaining) == len(entries):
        return False
    save_history(remaining, path)
    return True


def clear_history(path=None):
    path = path or HISTORY_FILE
    if os.path.exists(path):
        os.remove(path)
        logger.info("Cleared timestamp history")
