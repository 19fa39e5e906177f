"""
Infrastructure layer package.

In-process stores and the notification publisher.
"""
