# Constants
GREETING_TEMPLATE = "Hello, {name}! You've been greeted from Rust!"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765
DEFAULT_LOG_LEVEL = "DEBUG"

# Desktop shell dev server and bundled webview origins
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:1420",
    "http://127.0.0.1:1420",
    "tauri://localhost",
    "http://tauri.localhost",
]

UNKNOWN_IDENTIFIER = "unknown"
FILE_ENCODING = "utf-8"
