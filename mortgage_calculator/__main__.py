"""Run the service with uvicorn: python -m mortgage_calculator"""

import uvicorn

from mortgage_calculator.config import settings

if __name__ == "__main__":
    uvicorn.run("mortgage_calculator.api.main:app", host=settings.host, port=settings.port, log_config=None)
