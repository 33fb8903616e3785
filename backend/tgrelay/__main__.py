import uvicorn

from tgrelay.config import settings

if __name__ == "__main__":
    uvicorn.run("tgrelay.main:app", host=settings.host, port=settings.port)
