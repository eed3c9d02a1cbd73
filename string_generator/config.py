# -*- coding: utf-8 -*-

"""Application-wide constants."""

SETTINGS_ORG = "StringTools"
SETTINGS_APP = "RandomStringGenerator"
SETTINGS_GEOMETRY = "geometry"

LOG_LEVEL_ENV = "STRING_GENERATOR_LOG_LEVEL"

MIN_LENGTH = 4
MAX_LENGTH = 50
DEFAULT_LENGTH = 12

HISTORY_LIMIT = 5

# how long the "Copied!" notice stays up after a copy
COPY_NOTICE_MS = 2000
