from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from tgrelay.config import settings
from tgrelay.logging_setup import setup_logging
from tgrelay.routers import message

setup_logging(settings.log_level)

app = FastAPI(title="tgrelay", version="0.1.0")

app.include_router(message.router)
app.add_exception_handler(StarletteHTTPException, message.http_exception_handler)


@app.get("/health")
async def health():
    return {"status": "ok"}
