"""Application-wide configuration constants."""

# --- Identity ---
APP_NAME = "lanbeam"
APP_DESCRIPTION = "A device to device file transfer program"

# --- Networking ---
DEFAULT_PORT = 80  # TODO: switch to 443 once transfers are encrypted
PORT_MIN = 0
PORT_MAX = 65535

# --- Prompts ---
INTERFACE_PROMPT = "Found network interfaces, choose one:"
ADDRESS_PROMPT = "Choose an IP address:"

# --- HTTP responder ---
GREETING = "Hello World!"

# --- QR rendering ---
QR_DARK = "█"
QR_LIGHT = " "
QR_MODULE_WIDTH = 2  # characters per module horizontally
QR_MODULE_HEIGHT = 1  # lines per module vertically
QR_BORDER = 4  # quiet zone, in modules
# black on white so the code scans on dark terminals too
QR_LINE_STYLE = "\x1b[30;47m{}\x1b[0m"

# --- Logging ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
