from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .core.constants import DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .auth.tokens import IdentityTokenVerifier
from .errors import register_error_handlers

from .container import Container, build_container
from .absences.controller import register as register_absences
from .admin.controller import register as register_admin
from .attendance_hours.controller import register as register_hours
from .auth.controller import register as register_auth
from .exports.controller import register as register_exports
from .geofence.controller import register as register_geofence
from .leaves.controller import register as register_leaves
from .special_days.controller import register as register_special_days

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        token_verifier = IdentityTokenVerifier(
            getattr(settings, "IDENTITY_SECRET", ""),
            audience=getattr(settings, "IDENTITY_AUDIENCE", None),
            leeway_seconds=int(getattr(settings, "IDENTITY_TOKEN_LEEWAY_SECONDS", 0)),
        )
        container = build_container(db_config=db_config, token_verifier=token_verifier)

    app.extensions["school_attendance"] = container

    register_error_handlers(app)
    register_auth(app, container)
    register_admin(app, container)
    register_leaves(app, container)
    register_absences(app, container)
    register_geofence(app, container)
    register_hours(app, container)
    register_special_days(app, container)
    register_exports(app, container)

    return app
