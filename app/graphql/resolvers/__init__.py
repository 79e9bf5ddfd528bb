import strawberry

from app.db.store import Store


def store_from(info: strawberry.Info) -> Store:
    return info.context["store"]
