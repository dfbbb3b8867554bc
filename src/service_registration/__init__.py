from __future__ import annotations

import os
from importlib import metadata

try:
    __version__ = metadata.version("service-registration")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__build_time__ = os.getenv("SERVICE_REGISTRATION_BUILD_TIME", "unknown")
