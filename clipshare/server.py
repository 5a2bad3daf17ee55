"""Flask app serving the shared clipboard and the page that polls it."""
import logging
import traceback

import pyperclip
from flask import Flask, current_app, jsonify, render_template_string, request
from werkzeug.exceptions import HTTPException

from clipshare import config
from clipshare.errors import PayloadError, format_size
from clipshare.page import HTML_TEMPLATE
from clipshare.payload import validate_partial
from clipshare.store import SharedStore

logger = logging.getLogger(__name__)

SYNC_ROUTES = ("/sync", "/api/text")


def create_app(store=None, settings=None):
    """Build the app. ``store`` defaults to a fresh ``SharedStore``."""
    app = Flask(__name__)
    app.config.update(config.defaults())
    if settings:
        app.config.update(settings)
    app.extensions["clipshare_store"] = store if store is not None else SharedStore()

    app.add_url_rule("/", "index", index, methods=["GET"])
    for rule in SYNC_ROUTES:
        name = rule.strip("/").replace("/", "_")
        app.add_url_rule(rule, f"fetch_{name}", fetch, methods=["GET"])
        app.add_url_rule(rule, f"update_{name}", update, methods=["POST"])

    app.register_error_handler(Exception, handle_error)
    return app


def get_store(app=None) -> SharedStore:
    return (app or current_app).extensions["clipshare_store"]


def index():
    return render_template_string(
        HTML_TEMPLATE,
        poll_interval_ms=int(current_app.config["POLL_INTERVAL"] * 1000),
        max_image_bytes=current_app.config["MAX_IMAGE_BYTES"],
        max_image_label=format_size(current_app.config["MAX_IMAGE_BYTES"]),
    )


def fetch():
    return jsonify(get_store().read().to_dict())


def update():
    data = request.get_json(force=True, silent=True)
    try:
        partial = validate_partial(data)
    except PayloadError as e:
        logger.warning("Rejected update: %s", e)
        return jsonify({"error": str(e)}), 400

    payload = get_store().write(partial)
    logger.info(
        "Payload updated: %s",
        ", ".join(f"{key}={len(value or '')} chars" for key, value in partial.items()) or "no fields",
    )

    if "text" in partial and current_app.config["MIRROR_CLIPBOARD"]:
        mirror_to_clipboard(partial["text"])

    return jsonify(payload.to_dict())


def mirror_to_clipboard(text):
    """Copy ``text`` into this host's clipboard. Failures are logged only."""
    # CRLF→LF for the host clipboard; the stored text stays exact
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    try:
        pyperclip.copy(text)
        logger.info("Text copied to host clipboard: %d characters", len(text))
    except pyperclip.PyperclipException as e:
        logger.error("Failed to copy to host clipboard: %s", e)


def handle_error(e):
    if isinstance(e, HTTPException):
        return jsonify({"error": e.description}), e.code
    logger.error("Server error: %s", traceback.format_exc())
    return jsonify({"error": str(e)}), 500
