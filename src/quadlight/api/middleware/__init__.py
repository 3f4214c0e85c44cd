"""API Middleware - exception handlers shared by all routes"""
