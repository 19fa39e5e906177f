"""
HTTP surface of the service.

Routers parse requests into commands and queries, call a use case and
map the returned entities onto response schemas.
"""
