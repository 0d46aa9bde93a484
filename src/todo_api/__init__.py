"""
Todo lists backend package.

The FastAPI application is built by ``todo_api.main.create_app``; a default
instance configured from the environment is available as ``todo_api.main.app``.
"""

__version__ = "0.1.0"
