"""
Entry point for the star-cut service.

Running this script with ``python run.py`` will start the FastAPI
server that exposes the star-cut geometry API.  The application
defined in ``backend/starcut/main.py`` is imported after adjusting the
Python path to include the ``backend`` directory.
"""

from __future__ import annotations

import sys
from pathlib import Path

import logging
import uvicorn

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main() -> None:
    """Run the Uvicorn server hosting the star-cut application."""
    # Determine the backend directory relative to this file and ensure it is
    # on sys.path so that ``starcut`` can be imported without installation.
    backend_dir = Path(__file__).resolve().parent / "backend"
    if str(backend_dir) not in sys.path:
        sys.path.append(str(backend_dir))

    # Import the FastAPI application.  We import inside main() to avoid
    # modifying sys.path at module import time.
    from starcut.main import app  # type: ignore

    # Start Uvicorn.  Bind to all interfaces on port 8000 by default.
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
