import logging

import uvicorn
from fastapi import FastAPI

from app.core.config import APP_TITLE, GRAPHQL_PATH, HOST, PORT
from app.core.logging_middleware import LoggingMiddleware
from app.db.init_db import init_store
from app.graphql.schema import create_graphql_router, validate_schema

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_TITLE)

# Middleware
app.add_middleware(LoggingMiddleware)


# Startup event
@app.on_event("startup")
def on_startup():
    validate_schema()
    app.state.store = init_store()
    logger.info("Server ready at http://localhost:%s%s", PORT, GRAPHQL_PATH)
    logger.info(APP_TITLE)


# GraphQL is the only route
app.include_router(create_graphql_router())


def run() -> None:
    uvicorn.run("app.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
