"""HTTP surface — FastAPI routers, schemas and dependencies."""
