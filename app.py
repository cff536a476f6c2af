import logging
import os
import re

import streamlit as st

from batch_input import (
    CUSTOM_SEPARATOR,
    SEPARATOR_CANDIDATES,
    count_items,
    resolve_separator,
    separator_display_name,
    split_batch_text,
)
from database import (
    delete_all_history,
    delete_history_item,
    get_batch_items,
    get_batches,
    get_history,
    init_db,
    insert_batch_items,
    insert_history_item,
    now_text,
)
from history_actions import (
    MENU_KEY,
    QR_MODE_KEY,
    SELECTED_BATCH_KEY,
    SHOW_SINGLE_KEY,
    SINGLE_CONTENT_KEY,
    selected_batch_index,
    use_history_item,
    view_batch,
)
from settings_store import (
    MAX_BATCH_QR_SIZE,
    MAX_QR_SIZE,
    MIN_BATCH_QR_SIZE,
    MIN_QR_SIZE,
    clamp_qr_size,
    load_settings,
    save_settings,
)
from timestamp_history import (
    add_history_entry,
    clear_history,
    delete_history_entry,
    load_history,
    sorted_history,
)
from utils.naming_converter import NamingConvention, describe
from utils.qr_generator import export_batch, export_file_name, qr_png_bytes
from utils.timestamp_converter import convert_timestamp, current_time_reference


logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

SIDEBAR_HISTORY_LIMIT = 20
GRID_COLUMNS = 4
SEPARATOR_OPTIONS = SEPARATOR_CANDIDATES[:5] + [CUSTOM_SEPARATOR]


def clean_text(value):
    if value is None:
        return ""
    return str(value).strip()


def separator_label(value):
    return "Custom" if value == CUSTOM_SEPARATOR else separator_display_name(value)


def batch_export_dir(settings, batch_timestamp):
    stamp = re.sub(r"[^0-9A-Za-z]+", "-", batch_timestamp).strip("-")
    return os.path.join(settings.get("export_dir", "qr_exports"), f"batch_{stamp}")


def show_qr_grid(texts, size, key_prefix):
    columns = st.columns(GRID_COLUMNS)
    for index, text in enumerate(texts):
        png = qr_png_bytes(text, size=size)
        with columns[index % GRID_COLUMNS]:
            st.image(png, width=size)
            st.caption(text)
            st.download_button(
                "Download",
                data=png,
                file_name=export_file_name(text, index),
                mime="image/png",
                key=f"{key_prefix}_download_{index}",
            )


def show_history_sidebar():
    st.sidebar.subheader("QR History")
    items = get_history()
    if not items:
        st.sidebar.caption("No history yet.")
        return

    for item in items[:SIDEBAR_HISTORY_LIMIT]:
        prefix = f"[batch #{item['batch_index'] + 1}] " if item["is_batch_generated"] else ""
        st.sidebar.write(f"{prefix}{item['text'][:40]}")
        col_use, col_batch, col_delete = st.sidebar.columns(3)
        col_use.button(
            "Use",
            key=f"use_qr_{item['id']}",
            on_click=use_history_item,
            args=(st.session_state, item),
        )
        if item["is_batch_generated"]:
            col_batch.button(
                "View batch",
                key=f"view_batch_{item['id']}",
                on_click=view_batch,
                args=(st.session_state, item),
            )
        if col_delete.button("✕", key=f"delete_qr_{item['id']}"):
            delete_history_item(item["id"])
            st.rerun()

    if st.sidebar.button("Clear QR History"):
        removed = delete_all_history()
        st.sidebar.success(f"Removed {removed} item(s).")
        st.rerun()


def show_qr_generator(settings):
    st.header("QR Code Generator")
    mode = st.radio("Mode", ["Single", "Batch"], horizontal=True, key=QR_MODE_KEY)

    if mode == "Single":
        content = st.text_area("Content", key=SINGLE_CONTENT_KEY)
        size = st.slider(
            "QR size (px)",
            min_value=MIN_QR_SIZE,
            max_value=MAX_QR_SIZE,
            value=clamp_qr_size(settings.get("qr_size")),
            step=10,
        )
        if st.button("Generate QR"):
            if not clean_text(content):
                st.session_state[SHOW_SINGLE_KEY] = False
                st.error("Please enter some content.")
                return
            insert_history_item(clean_text(content))
            st.session_state[SHOW_SINGLE_KEY] = True

        content = clean_text(content)
        if st.session_state.get(SHOW_SINGLE_KEY) and content:
            png = qr_png_bytes(content, size=size)
            st.image(png, width=size)
            st.download_button("Download PNG", data=png, file_name="QRCode.png", mime="image/png")
        return

    content = st.text_area("Batch content", height=200)
    auto_detect = st.checkbox("Auto-detect separator", value=settings.get("auto_detect_separator", True))
    saved_separator = settings.get("separator", "\n")
    separator_type = st.selectbox(
        "Separator",
        SEPARATOR_OPTIONS,
        index=SEPARATOR_OPTIONS.index(saved_separator) if saved_separator in SEPARATOR_OPTIONS else 0,
        format_func=separator_label,
        disabled=auto_detect,
    )
    custom_separator = st.text_input(
        "Custom separator",
        value=settings.get("custom_separator", ""),
        disabled=auto_detect or separator_type != CUSTOM_SEPARATOR,
    )
    size = st.slider(
        "QR size (px)",
        min_value=MIN_BATCH_QR_SIZE,
        max_value=MAX_BATCH_QR_SIZE,
        value=int(settings.get("batch_qr_size", 150)),
        step=10,
    )

    separator = resolve_separator(content, auto_detect, separator_type, custom_separator)
    st.caption(f"Separator: {separator_display_name(separator)} | Items: {count_items(content, separator)}")

    if st.button("Generate Batch"):
        texts = split_batch_text(content, separator)
        if not texts:
            st.error("No content to generate.")
            return
        batch_timestamp = now_text()
        insert_batch_items(texts, batch_timestamp=batch_timestamp)
        logger.info("Generated batch of %d QR code(s)", len(texts))
        st.session_state["last_batch"] = {"timestamp": batch_timestamp, "texts": texts, "size": size}
        st.success(f"Done! Generated {len(texts)} QR code(s).")

    last_batch = st.session_state.get("last_batch")
    if last_batch:
        show_qr_grid(last_batch["texts"], last_batch["size"], key_prefix="last_batch")
        if st.button("Export Batch"):
            directory = batch_export_dir(settings, last_batch["timestamp"])
            paths = export_batch(
                last_batch["texts"],
                directory,
                batch_timestamp=last_batch["timestamp"],
                size=last_batch["size"],
            )
            st.success(f"Exported {len(paths)} file(s) to {directory}")


def show_batch_history(settings):
    st.header("Batch History")
    batches = get_batches()
    if not batches:
        st.info("No batch generations yet.")
        return

    batch_timestamps = [batch["batch_timestamp"] for batch in batches]
    selected = st.selectbox(
        "Batch",
        batch_timestamps,
        index=selected_batch_index(st.session_state, batch_timestamps),
        format_func=lambda stamp: next(
            f"{b['batch_timestamp']} ({b['item_count']} items)" for b in batches if b["batch_timestamp"] == stamp
        ),
    )
    st.session_state[SELECTED_BATCH_KEY] = selected
    items = get_batch_items(selected)
    texts = [item["text"] for item in items]
    size = int(settings.get("batch_qr_size", 150))
    show_qr_grid(texts, size, key_prefix="batch_history")

    if st.button("Export This Batch"):
        directory = batch_export_dir(settings, selected)
        paths = export_batch(texts, directory, batch_timestamp=selected, size=size)
        st.success(f"Exported {len(paths)} file(s) to {directory}")


def show_name_converter():
    st.header("Variable Name Converter")
    identifier = st.text_input("Variable name")
    if not identifier:
        st.caption("Enter a variable name to convert it between naming conventions.")
        return

    result = describe(identifier)
    if result["detected"] != NamingConvention.UNKNOWN.value:
        st.write(f"Detected: **{result['detected_label']}**")

    for row in result["conversions"]:
        col_label, col_value = st.columns([1, 3])
        col_label.caption(row["label"])
        # st.code renders with a copy button
        col_value.code(row["value"], language=None)


def show_timestamp_converter(settings):
    st.header("Timestamp Converter")

    date_text, millis = current_time_reference()
    st.subheader("Current Time")
    col_date, col_stamp = st.columns(2)
    col_date.code(date_text, language=None)
    col_stamp.code(millis, language=None)

    value = st.text_input("Timestamp")
    milliseconds = st.toggle(
        "Milliseconds",
        value=settings.get("timestamp_milliseconds", True),
    )

    converted = ""
    try:
        converted = convert_timestamp(value, milliseconds=milliseconds)
    except ValueError as exc:
        st.error(str(exc))

    if converted:
        st.subheader("Result")
        st.code(converted, language=None)
        if st.button("Add to History"):
            if add_history_entry(value, milliseconds, converted) is None:
                st.info("Already in history.")

    st.subheader("History")
    entries = sorted_history(load_history())
    if not entries:
        st.caption("No history yet.")
        return

    for entry in entries:
        col_entry, col_delete = st.columns([5, 1])
        unit = "ms" if entry.get("is_milliseconds") else "s"
        col_entry.write(f"`{entry['timestamp']}` ({unit}) → `{entry['converted_time']}`")
        if col_delete.button("Delete", key=f"delete_ts_{entry['id']}"):
            delete_history_entry(entry["id"])
            st.rerun()

    if st.button("Clear History"):
        clear_history()
        st.rerun()


def show_settings(settings):
    st.header("Settings")

    with st.form("settings_form"):
        qr_size = st.slider(
            "QR size (px)",
            min_value=MIN_QR_SIZE,
            max_value=MAX_QR_SIZE,
            value=clamp_qr_size(settings["qr_size"]),
            step=10,
        )
        batch_qr_size = st.slider(
            "Batch QR size (px)",
            min_value=MIN_BATCH_QR_SIZE,
            max_value=MAX_BATCH_QR_SIZE,
            value=int(settings["batch_qr_size"]),
            step=10,
        )
        auto_detect_separator = st.checkbox("Auto-detect batch separator", value=settings["auto_detect_separator"])
        separator = st.selectbox(
            "Default batch separator",
            SEPARATOR_OPTIONS,
            index=SEPARATOR_OPTIONS.index(settings["separator"]) if settings["separator"] in SEPARATOR_OPTIONS else 0,
            format_func=separator_label,
        )
        custom_separator = st.text_input("Custom separator", value=settings["custom_separator"])
        timestamp_milliseconds = st.checkbox("Timestamps in milliseconds", value=settings["timestamp_milliseconds"])
        export_dir = st.text_input("Export directory", value=clean_text(settings["export_dir"]))
        submitted = st.form_submit_button("Save Settings")

    if submitted:
        save_settings({
            **settings,
            "qr_size": int(qr_size),
            "batch_qr_size": int(batch_qr_size),
            "auto_detect_separator": auto_detect_separator,
            "separator": separator,
            "custom_separator": custom_separator,
            "timestamp_milliseconds": timestamp_milliseconds,
            "export_dir": clean_text(export_dir) or "qr_exports",
        })
        st.success("Settings saved.")
        st.rerun()


init_db()
settings = load_settings()

st.set_page_config(
    page_title="QR Toolbox",
    layout="wide",
    initial_sidebar_state="expanded",
)
st.title("QR Toolbox")

menu = st.sidebar.selectbox(
    "Menu",
    ["QR Generator", "Batch History", "Name Converter", "Timestamp Converter", "Settings"],
    key=MENU_KEY,
)
show_history_sidebar()

if menu == "QR Generator":
    show_qr_generator(settings)
elif menu == "Batch History":
    show_batch_history(settings)
elif menu == "Name Converter":
    show_name_converter()
elif menu == "Timestamp Converter":
    show_timestamp_converter(settings)
else:
    show_settings(settings)
