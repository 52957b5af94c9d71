"""City Info API.

A REST API exposing cities and their points of interest, with bearer token
authentication and a PDF upload/download endpoint.
"""

__version__ = "0.1.0"
