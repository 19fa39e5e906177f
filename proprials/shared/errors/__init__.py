"""
Exception handlers that turn investing domain errors into JSON
responses of the shape ``{"error": ..., "detail": ...}``.
"""
