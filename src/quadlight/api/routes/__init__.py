"""
API Routes - HTTP endpoint handlers

Each area (lighting, device) has its own router; main.py mounts them
under /api/v1.
"""
