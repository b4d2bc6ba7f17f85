"""Service URLs and client-side limits.

Limits mirror what the remote service enforces so that obviously invalid
calls fail locally; they may change on the service side at any time.
"""

from __future__ import annotations

# REST base URLs per service
DATA_STORE_URL = "https://apis.roblox.com/datastores/v1/universes"
ORDERED_DATA_STORE_URL = "https://apis.roblox.com/ordered-data-stores/v1/universes"
PLACE_MANAGEMENT_URL = "https://apis.roblox.com/universes/v1"
MESSAGING_SERVICE_URL = "https://apis.roblox.com/messaging-service/v1/universes"

DEFAULT_SCOPE = "global"
# No overall request deadline; place uploads may take minutes
DEFAULT_TIMEOUT: float | None = None

MAX_PAGE_SIZE = 50
MAX_ENTRY_BYTES = 4_000_000
MAX_PLACE_FILE_MB = 100
MAX_TOPIC_LENGTH = 80
MAX_MESSAGE_BYTES = 1024

# Environment variables read by Universe.from_env()
ENV_UNIVERSE_ID = "OPENCLOUD_UNIVERSE_ID"
ENV_API_KEY = "OPENCLOUD_API_KEY"
