# python -m profile_api
import uvicorn

from .config import settings


def main():
    uvicorn.run("profile_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
