"""Splitting of pasted text into the items of a batch QR generation."""

# Checked in this order; on equal counts the earlier one wins.
SEPARATOR_CANDIDATES = ["\n", ",", ";", "\t", " ", "|", "-"]

DEFAULT_SEPARATOR = "\n"
CUSTOM_SEPARATOR = "custom"
MAX_SPACE_SEPARATED_ITEMS = 10

SEPARATOR_NAMES = {
    "\n": "Newline",
    ",": "Comma",
    ";": "Semicolon",
    " ": "Space",
    "\t": "Tab",
}


def split_batch_text(text, separator):
    if not text:
        return []
    parts = (part.strip() for part in text.split(separator or DEFAULT_SEPARATOR))
    return [part for part in parts if part]


def count_items(text, separator):
    return len(split_batch_text(text, separator))


def detect_separator(text):
    best_separator = DEFAULT_SEPARATOR
    max_count = 0

    for separator in SEPARATOR_CANDIDATES:
        count = text.count(separator)
        if count <= 0:
            continue
        # only worth it when the split yields at least two real items
        if count_items(text, separator) >= 2 and count > max_count:
            best_separator = separator
            max_count = count

    # plain prose is full of spaces
    if best_separator == " " and count_items(text, " ") > MAX_SPACE_SEPARATED_ITEMS:
        best_separator = DEFAULT_SEPARATOR

    return best_separator


def resolve_separator(text, auto_detect=True, separator_type=DEFAULT_SEPARATOR, custom_separator=""):
    if auto_detect:
        return detect_separator(text)
    if separator_type == CUSTOM_SEPARATOR:
        return custom_separator or DEFAULT_SEPARATOR
    return separator_type or DEFAULT_SEPARATOR


def separator_display_name(separator):
    return SEPARATOR_NAMES.get(separator, f"'{separator}'")
