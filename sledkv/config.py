"""
Overall configurations and constants for the sledkv python library.
"""

import os

################################################################################
# Configurations you can change to customize sledkv's behavior.
################################################################################

# The url of the store that the command line tool talks to when `--url` is not
# given. The library itself always takes an explicit base url. Set the environment
# variable `SLEDKV_URL` to point the command line at a different server.
DEFAULT_URL = os.environ.get("SLEDKV_URL", "http://localhost:3030")

# Whether to print debug logs in the command line tool. Set the environment
# variable `SLEDKV_DEBUG` to `true` to enable.
DEBUG = os.environ.get("SLEDKV_DEBUG", "false").lower() in (
    "true",
    "1",
    "t",
    "on",
)

################################################################################
# Protocol constants of the sled server. These are fixed by the server.
################################################################################

# Body returned by the health endpoint of a healthy server, after quotes are
# stripped.
HEALTHY_BODY = "OK"

# Status code the server uses for a missing key.
NOT_FOUND_STATUS = 404
