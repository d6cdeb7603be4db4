"""Run the API with uvicorn: `python -m matchfeed`."""

import uvicorn

from matchfeed.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "matchfeed.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
