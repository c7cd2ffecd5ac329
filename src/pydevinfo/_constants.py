"""Internal constants shared across the library."""

MODULE = "devinfo"
ACK = "send"

# Seconds without an update before a device is shown as stale.
HOUSEKEEPING_TIMEOUT = 300

DEFAULT_TOPIC_TEMPLATE = "tln/{name}/send"
REFRESH_ALL = "all"
SYSINFO_REQUEST = "send plugin sysinfo report myself"

LOG_COMMAND = "record log '{payload}'"
PUBLISH_COMMAND = "publish report topic='{topic}' payload='{payload}'"

NOT_AVAILABLE = "n/a"

# ------------------------------------------------------------------
# Temperature bands (°C); boundaries belong to the lower band
# ------------------------------------------------------------------

TEMPERATURE_NORMAL_MAX = 60.0
TEMPERATURE_WARM_MAX = 85.0

SHOW = """
action plugin devinfo update {json}
    Update devinfo database. (usually from mqtt)

action plugin devinfo refresh all
    To ask all devices in devinfo to send sysinfo.
"""
