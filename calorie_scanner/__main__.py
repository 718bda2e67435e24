import uvicorn

from .core.settings import settings

if __name__ == "__main__":
    uvicorn.run("calorie_scanner.main:app", host=settings.host, port=settings.port)
