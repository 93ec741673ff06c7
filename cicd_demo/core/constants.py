"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------
APP_NAME = "ci-cd-demo"
APP_DESCRIPTION = "End-to-end CI/CD demo for Cloud Native Rabat"
EVENT_NAME = "Cloud Native Rabat"
TAGLINE = "From Laptop to Production: The Cloud Native Way"

# Reported when no version was injected at build/deploy time.
DEFAULT_VERSION = "dev"

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# ---------------------------------------------------------------------------
# Probe payloads
# ---------------------------------------------------------------------------
HEALTH_STATUS_OK = "ok"
READY_STATUS = "ready"
