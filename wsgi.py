#!/usr/bin/env python3
"""
WSGI entry point for deployment
Exposes the Flask application built by main.create_app for gunicorn
"""

import sys
from pathlib import Path

# Add the current directory to the Python path
sys.path.insert(0, str(Path(__file__).parent))

from main import app

# Export the application for gunicorn
application = app
