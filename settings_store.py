import json
import logging
import os


logger = logging.getLogger(__name__)

SETTINGS_FILE = "app_settings.json"

MIN_QR_SIZE = 100
MAX_QR_SIZE = 400
MIN_BATCH_QR_SIZE = 80
MAX_BATCH_QR_SIZE = 250


DEFAULT_SETTINGS = {
    "qr_size": 200,
    "batch_qr_size": 150,
    "auto_detect_separator": True,
    "separator": "\n",
    "custom_separator": "",
    "timestamp_milliseconds": True,
    "export_dir": "qr_exports",
    "flask_port": 5000,
}


def clamp_size(value, low, high, default):
    try:
        size = int(value)
    except (TypeError, ValueError):
        return default
    return max(low, min(high, size))


def clamp_qr_size(value):
    return clamp_size(value, MIN_QR_SIZE, MAX_QR_SIZE, DEFAULT_SETTINGS["qr_size"])


def clamp_batch_qr_size(value):
    return clamp_size(value, MIN_BATCH_QR_SIZE, MAX_BATCH_QR_SIZE, DEFAULT_SETTINGS["batch_qr_size"])


def load_settings(path=None):
    path = path or SETTINGS_FILE
    settings = DEFAULT_SETTINGS.copy()
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as file_obj:
                data = json.load(file_obj)
                if isinstance(data, dict):
                    settings.update(data)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
    settings["qr_size"] = clamp_qr_size(settings["qr_size"])
    settings["batch_qr_size"] = clamp_batch_qr_size(settings["batch_qr_size"])
    return settings


def save_settings(settings, path=None):
    merged = DEFAULT_SETTINGS.copy()
    merged.update(settings or {})
    merged["qr_size"] = clamp_qr_size(merged["qr_size"])
    merged["batch_qr_size"] = clamp_batch_qr_size(merged["batch_qr_size"])
    with open(path or SETTINGS_FILE, "w", encoding="utf-8") as file_obj:
        json.dump(merged, file_obj, indent=2)
    return merged
