#!/usr/bin/env python3
"""
Development server launcher for the Glossário service

Starts the FastAPI development server with proper configuration.
"""

import os
import sys
import uvicorn

# Add parent directory to Python path for module imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from glossario.config import settings

def main():
    """Launch the development server"""
    store = "configured" if settings.store_config().is_configured else "not configured"
    print(f"🚀 Starting Glossário Development Server")
    print(f"📍 Host: {settings.host}:{settings.port}")
    print(f"🤖 Generation Backend: {settings.default_backend}")
    print(f"🗄️  Term Store: {store}")
    print(f"🔧 Environment: {settings.environment}")
    print(f"📊 Debug Mode: {settings.debug}")
    print("-" * 50)

    # Launch the FastAPI server
    uvicorn.run(
        "glossario.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning"
    )

if __name__ == "__main__":
    main()
