"""Actions behind the QR history sidebar buttons.

They only write to the session state (any mapping) so the next rerun of the
streamlit script picks them up.
"""

MENU_KEY = "menu"
QR_MODE_KEY = "qr_mode"
SINGLE_CONTENT_KEY = "single_content"
SHOW_SINGLE_KEY = "show_single_qr"
SELECTED_BATCH_KEY = "selected_batch"

QR_GENERATOR_PAGE = "QR Generator"
BATCH_HISTORY_PAGE = "Batch History"


def use_history_item(state, item):
    state[MENU_KEY] = QR_GENERATOR_PAGE
    state[QR_MODE_KEY] = "Single"
    state[SINGLE_CONTENT_KEY] = item["text"]
    state[SHOW_SINGLE_KEY] = True


def view_batch(state, item):
    """Open the Batch History page on the batch *item* belongs to."""
    batch_timestamp = item.get("batch_timestamp")
    if not batch_timestamp:
        return False
    state[MENU_KEY] = BATCH_HISTORY_PAGE
    state[SELECTED_BATCH_KEY] = batch_timestamp
    return True


def selected_batch_index(state, batch_timestamps):
    selected = state.get(SELECTED_BATCH_KEY)
    if selected in batch_timestamps:
        return batch_timestamps.index(selected)
    return 0
