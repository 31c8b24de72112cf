"""
Edge Images service - Flask API and CLI around the edge_images engine

This app:
1. Builds provider URLs and srcset ladders over HTTP
2. Keeps one render context (content width ceiling) per request
3. Offers the same operations from the command line

Deployment:
    pip install edge-images
    flask --app edge_images_service.app:create_app run
"""

from .app import create_app
from .config import ServiceConfig

__all__ = ["create_app", "ServiceConfig"]
