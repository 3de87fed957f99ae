"""Resource paths on the config backend, relative to the versioned base URL."""

BANKS_PATH = "banks"
GROUPS_PATH = "groups"
