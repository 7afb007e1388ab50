"""Constants for pynanoleaf library."""

from __future__ import annotations


# API Configuration
DEFAULT_PORT = 16021
DEFAULT_BASE_PATH = "/api/v1/"

# Pairing (no token in the path)
PAIRING_PATH = "/api/v1/new"

# State Endpoints
PATH_STATUS = "/"
PATH_IDENTIFY = "/identify"
PATH_STATE = "/state"
PATH_BRIGHTNESS = "/state/brightness"
PATH_HUE = "/state/hue"
PATH_SATURATION = "/state/sat"
PATH_TEMPERATURE = "/state/ct"  # device reports 0-100, not 1200-6500 Kelvin

# Effect Endpoints
PATH_EFFECTS = "/effects"
PATH_EFFECTS_LIST = "/effects/effectsList"

# Rhythm Module Endpoints
PATH_RHYTHM_CONNECTED = "/rhythm/rhythmConnected"
PATH_RHYTHM_ACTIVE = "/rhythm/rhythmActive"
PATH_RHYTHM_HARDWARE_VERSION = "/rhythm/hardwareVersion"
PATH_RHYTHM_FIRMWARE_VERSION = "/rhythm/firmwareVersion"
PATH_RHYTHM_MODE = "/rhythm/rhythmMode"

# Environment Configuration
ENV_PREFIX = "NANOLEAF_"
