"""Trade bounded context: HTTP interface (routers, schemas, dependencies)."""
