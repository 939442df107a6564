# app/main.py
"""
Process entry point.

    uvicorn app.main:app --host 0.0.0.0 --port 3000

or simply `python -m app.main`, which reads HOST / PORT from settings.
"""
import structlog

from app.adapters.api.main import create_app
from app.shared.config import settings

logger = structlog.get_logger()

# Entry point for Uvicorn
app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info("server_starting", url=f"http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
