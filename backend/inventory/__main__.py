import uvicorn
from inventory.config import settings


def main():
    uvicorn.run("inventory.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
