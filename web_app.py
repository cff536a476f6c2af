"""
Flask web app exposing the converters and QR rendering over HTTP.
"""

import logging
import os

from flask import Flask, Response, jsonify, request

from utils.naming_converter import describe
from utils.qr_generator import qr_png_bytes
from utils.timestamp_converter import convert_timestamp, current_time_reference

app = Flask(__name__)
logger = logging.getLogger(__name__)

MAX_QR_SIZE = 1000


def error_response(message, status=400):
    return jsonify({"error": message}), status


# -----------------------------
# Name Converter
# -----------------------------
@app.route("/api/naming")
def naming():
    text = request.args.get("text", "")
    return jsonify(describe(text))


# -----------------------------
# Timestamp Converter
# -----------------------------
@app.route("/api/timestamp")
def timestamp():
    value = request.args.get("value", "")
    unit = request.args.get("unit", "ms").lower()
    if unit not in ("ms", "s"):
        return error_response("unit must be 'ms' or 's'")

    try:
        converted = convert_timestamp(value, milliseconds=(unit == "ms"))
    except ValueError as exc:
        return error_response(str(exc))

    return jsonify({"value": value, "unit": unit, "converted": converted})


@app.route("/api/timestamp/now")
def timestamp_now():
    date_text, millis = current_time_reference()
    return jsonify({"date": date_text, "timestamp": millis})


# -----------------------------
# QR Image
# -----------------------------
@app.route("/qr.png")
def qr_image():
    data = request.args.get("data", "")
    try:
        size = int(request.args.get("size", "200"))
    except ValueError:
        return error_response("size must be an integer")
    if size > MAX_QR_SIZE:
        return error_response(f"size must not exceed {MAX_QR_SIZE}")

    try:
        png = qr_png_bytes(data, size=size)
    except ValueError as exc:
        return error_response(str(exc))

    return Response(png, mimetype="image/png")


# -----------------------------
# Run Server
# -----------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", "5000"))
    logger.info("Serving on %s:%d", host, port)
    app.run(host=host, port=port, debug=False)
