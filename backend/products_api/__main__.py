import uvicorn

from products_api.config import settings


def main():
    uvicorn.run("products_api.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    main()
