"""Adaptador HTTP (FastAPI): routers, schemas, dependencias."""
