import logging

from fastapi import FastAPI

from deltadoc.api.deps import get_settings
from deltadoc.api.v1.routes import delta

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="deltadoc")


@app.get("/")
async def read_root():
    return {"message": "deltadoc"}


app.include_router(delta.router, prefix=settings.api_prefix, tags=["deltas"])
