"""Flask service exposing the ShakeSearch engine (search API + static assets)."""
from __future__ import annotations
from .web import create_app, main

__all__ = ["create_app", "main"]
