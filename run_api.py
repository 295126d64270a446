"""Run the prdiff FastAPI application."""

import uvicorn
import os
from pathlib import Path

from config.settings import settings

if __name__ == "__main__":
    # Set working directory to project root
    os.chdir(Path(__file__).parent)

    uvicorn.run(
        "prdiff.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        reload_dirs=["prdiff"]
    )
