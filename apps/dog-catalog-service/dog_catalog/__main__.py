"""Serve the API with uvicorn on SERVER_PORT."""
import uvicorn

from dog_catalog.utils import settings


def main() -> None:
    uvicorn.run(
        "dog_catalog.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.server_port(),
        log_level=settings.log_level_name().lower(),
    )


if __name__ == "__main__":
    main()
