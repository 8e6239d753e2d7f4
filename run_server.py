import logging

import uvicorn

from travel_calc.config.logging import setup_logging
from travel_calc.config.settings import settings
from travel_calc.main import app

logger = logging.getLogger("travel_calc")


if __name__ == "__main__":
    setup_logging(settings.log_level)
    logger.info("Server listening at http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
