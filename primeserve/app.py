# primeserve/app.py
from __future__ import annotations
from typing import Optional

from flask import Flask

from .api import prime_bp
from .settings import Settings

# `flask --app primeserve.app run` finds this factory; WSGI servers use "primeserve.app:create_app()"
def create_app(settings: Optional[Settings] = None) -> Flask:
    app = Flask(__name__)
    app.config["PRIMESERVE_SETTINGS"] = settings or Settings.from_env()
    app.register_blueprint(prime_bp)
    return app
