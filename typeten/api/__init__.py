"""Entrada ASGI (FastAPI) y handlers de excepciones."""
