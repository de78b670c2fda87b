import os

from dotenv import load_dotenv

load_dotenv()


def parse_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def parse_port(raw: str | None, default: int = 8080) -> int:
    if not raw:
        return default
    port = int(raw)
    if not 0 <= port <= 65535:
        raise ValueError(f"Invalid port value: {raw}")
    return port


HOST = os.environ.get("ITEM_API_HOST", "127.0.0.1")
PORT = parse_port(os.environ.get("ITEM_API_PORT"))
LOG_LEVEL = os.environ.get("ITEM_API_LOG_LEVEL", "info").lower()

# Exception text in 500 bodies is a debug aid; keep it off outside development.
EXPOSE_ERRORS = parse_bool(os.environ.get("ITEM_API_EXPOSE_ERRORS"), default=False)


def base_url(host: str, port: int) -> str:
    if ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}/"
