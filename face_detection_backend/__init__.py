"""
Face Detection Backend - root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic and infrastructure (SQL database, dashboard WebSocket, processing
worker client).
"""
