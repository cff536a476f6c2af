import json

from settings_store import (
    DEFAULT_SETTINGS,
    MAX_BATCH_QR_SIZE,
    MAX_QR_SIZE,
    MIN_BATCH_QR_SIZE,
    MIN_QR_SIZE,
    clamp_qr_size,
    load_settings,
    save_settings,
)


def test_defaults_when_file_is_missing(tmp_path):
    assert load_settings(str(tmp_path / "missing.json")) == DEFAULT_SETTINGS


def test_save_and_load(tmp_path):
    path = str(tmp_path / "settings.json")
    saved = save_settings({"qr_size": 300, "export_dir": "out"}, path=path)

    assert saved["qr_size"] == 300
    assert saved["auto_detect_separator"] is True
    assert load_settings(path) == saved


def test_invalid_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_settings(str(path)) == DEFAULT_SETTINGS


def test_batch_size_is_clamped(tmp_path):
    path = str(tmp_path / "settings.json")
    assert save_settings({"batch_qr_size": 999}, path=path)["batch_qr_size"] == MAX_BATCH_QR_SIZE

    with open(path, "w", encoding="utf-8") as file_obj:
        json.dump({"batch_qr_size": 10}, file_obj)
    assert load_settings(path)["batch_qr_size"] == MIN_BATCH_QR_SIZE


def test_qr_size_is_clamped(tmp_path):
    path = str(tmp_path / "settings.json")
    assert save_settings({"qr_size": 1000}, path=path)["qr_size"] == MAX_QR_SIZE

    with open(path, "w", encoding="utf-8") as file_obj:
        json.dump({"qr_size": 50}, file_obj)
    assert load_settings(path)["qr_size"] == MIN_QR_SIZE


def test_clamp_qr_size():
    assert clamp_qr_size("250") == 250
    assert clamp_qr_size("big") == DEFAULT_SETTINGS["qr_size"]
