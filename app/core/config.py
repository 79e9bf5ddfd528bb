APP_TITLE = "Student Management System API"

# DEV ONLY: fixed bind address, no env overrides.
HOST = "0.0.0.0"
PORT = 5000

GRAPHQL_PATH = "/graphql"
GRAPHIQL_ENABLED = True  # in-browser IDE on GET /graphql
