"""
API layer for the face detection backend.

Exposes HTTP endpoints under /api (auth, cameras, alerts), the health
endpoints and the dashboard WebSocket at the root path.
"""
