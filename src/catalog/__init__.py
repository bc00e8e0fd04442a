"""Library catalog service.

This package contains the book catalog domain (entities, repository and
service), the HTTP API built on FastAPI, and the runtime infrastructure
(configuration, logging and database sessions) that supports them.
"""

__version__ = "0.1.0"
