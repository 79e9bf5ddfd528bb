from fastapi import Request

from app.db.store import Store


# every request reads the store created at startup; tests override this.
def get_store(request: Request) -> Store:
    return request.app.state.store
