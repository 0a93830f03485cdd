from pathlib import Path
from fastapi import Request
from fastapi.templating import Jinja2Templates
from inventory.database import Database

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_database(request: Request) -> Database:
    """
    Store connection created at bootstrap (see main.create_app)
    """
    return request.app.state.database


def get_db(request: Request):
    """
    Dependency yielding a database session for one request
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
