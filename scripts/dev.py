import socket
import sys
from pathlib import Path

import uvicorn

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_settings  # noqa: E402


def ensure_port_available(port: int) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(("127.0.0.1", port))
        except OSError:
            print(f"Port {port} is not available. Stop the process using it and retry.")
            raise SystemExit(1)


def main() -> None:
    settings = get_settings()
    ensure_port_available(settings.port)

    print(f"Artist directory running on http://localhost:{settings.port}/api/artists")
    uvicorn.run(
        "main:app",
        port=settings.port,
        reload=True,
        app_dir=str(PROJECT_ROOT),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
