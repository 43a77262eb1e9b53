from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_HISTORY_LIMIT
from .rooms.controller import register as register_rooms
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log_level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(log_level)
    logging.getLogger("classroom_attendance").setLevel(log_level)

    container = build_container(
        auth_latency=float(getattr(settings, "AUTH_LATENCY_SECONDS", 0.0)),
        data_latency=float(getattr(settings, "DATA_LATENCY_SECONDS", 0.0)),
        seed_attendance=bool(getattr(settings, "SEED_MOCK_ATTENDANCE", True)),
        random_seed=getattr(settings, "MOCK_RANDOM_SEED", None),
    )
    app.extensions["classroom_attendance"] = container

    app.logger.debug(
        "settings=%s users=%d rooms=%d records=%d",
        settings_module,
        len(container.users_repo.list_all()),
        len(container.rooms_repo.list_all()),
        len(container.attendance_repo.list_all()),
    )

    register_users(app, container)
    register_rooms(app, container)
    register_attendance(app, container, history_limit=int(getattr(settings, "HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)))

    return app
