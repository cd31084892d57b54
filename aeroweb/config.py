"""Aeroweb provider configuration."""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env file from the working directory before reading the key
load_dotenv()

AEROWEB_API_KEY = os.getenv("AEROWEB_API_KEY", "")

HOST = "https://aviation.meteo.fr"
BASE_URL = f"{HOST}/FR/aviation/serveur_donnees.jsp"
REQUEST_TIMEOUT = float(os.getenv("AEROWEB_REQUEST_TIMEOUT", "30"))

# The provider always answers 200; a rejected key shows up in the body.
INVALID_KEY_MARKER = "<code>NOK</code>"

MAX_LOCATIONS = 50
