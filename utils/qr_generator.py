import io
import logging
import os
from datetime import datetime

import qrcode
from PIL import Image


logger = logging.getLogger(__name__)

EXPORT_INFO_FILE = "export_info.txt"
UNSAFE_FILENAME_CHARS = '/\\:*?"<>|'


def make_qr_image(data: str, size: int = 200) -> Image.Image:
    """Render *data* as a QR code scaled to exactly ``size`` x ``size`` pixels."""
    if not data:
        raise ValueError("QR content is empty.")
    size = int(size)
    if size <= 0:
        raise ValueError("QR size must be a positive number of pixels.")

    qr = qrcode.QRCode(border=4)
    qr.add_data(data)
    qr.make(fit=True)

    qr_img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    return qr_img.resize((size, size), Image.Resampling.NEAREST)


def qr_png_bytes(data: str, size: int = 200) -> bytes:
    buffer = io.BytesIO()
    make_qr_image(data, size=size).save(buffer, format="PNG")
    return buffer.getvalue()


def export_file_name(text, index):
    short_content = text[:20]
    for ch in UNSAFE_FILENAME_CHARS:
        short_content = short_content.replace(ch, "-")
    return f"{index + 1}_{short_content}.png"


def export_batch(texts, directory, batch_timestamp=None, size=200):
    """Write one PNG per text into *directory* plus an info file listing them."""
    os.makedirs(directory, exist_ok=True)

    lines = ["QR code batch export"]
    if batch_timestamp:
        lines.append(f"Generated at: {batch_timestamp}")
    lines.append(f"Exported at: {datetime.now().isoformat(sep=' ', timespec='seconds')}")
    lines.append(f"Total: {len(texts)} QR code(s)")
    lines.append("")

    paths = []
    for index, text in enumerate(texts):
        file_name = export_file_name(text, index)
        path = os.path.join(directory, file_name)
        make_qr_image(text, size=size).save(path)
        paths.append(path)

        lines.append(f"No.: {index + 1}")
        lines.append(f"File: {file_name}")
        lines.append(f"Content: {text}")
        lines.append("")

    with open(os.path.join(directory, EXPORT_INFO_FILE), "w", encoding="utf-8") as file_obj:
        file_obj.write("\n".join(lines))

    logger.info("Exported %d QR code(s) to %s", len(paths), directory)
    return paths
