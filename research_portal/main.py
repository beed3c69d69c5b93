import uvicorn

from research_portal.api.app import create_app
from research_portal.config.settings import Settings
from research_portal.database.connection import close_pool, init_pool
from research_portal.documents.service import build_document_service
from research_portal.logging.logger import Log


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        document_service = build_document_service(settings)
        app = create_app(settings, document_service)
        Log.info(f"Serving {settings.app_title} on {settings.api_host}:{settings.api_port}")
        uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
