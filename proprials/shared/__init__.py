"""
Cross-cutting pieces shared by every router: the domain-error to HTTP
mapping, request throttling and log setup.
"""
