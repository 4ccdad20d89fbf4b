from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container
from .reports.controller import register as register_reports


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "ATTENDANCE_API")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.info("settings=%s attendance_api=%s", settings_module, api_config.get("base_url"))

    container = container or build_container(api_config=api_config)

    register_attendance(app, container)
    register_reports(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
