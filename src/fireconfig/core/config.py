"""Core defaults (no environment reads)."""
from .. import __version__

RC_URL_TEMPLATE = "https://firebaseremoteconfig.googleapis.com/v1/projects/{project_id}/remoteConfig"
CLIENT_HEADER_NAME = "X-Firebase-Client"
CLIENT_HEADER_VALUE = f"fire-admin-python/{__version__}"
DEFAULT_TIMEOUT = 120
DEFAULT_OUTPUT_FORMAT = "json"
OUTPUT_FORMATS = {"json", "yaml"}
