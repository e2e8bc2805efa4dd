"""Run the API server: ``python -m face_detection_backend``"""

# Standard library imports
from pathlib import Path

# External package imports
import uvicorn
from dotenv import load_dotenv

# Local application imports
from .core.config import get_settings


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    settings = get_settings()
    uvicorn.run(
        "face_detection_backend.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
