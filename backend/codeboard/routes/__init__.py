# Routes package init
"""
CodeBoard Backend: API Routes Package
======================================

Route Inventory:
    - languages.py:  POST /api/languages/detect   (classify a snippet)
                     GET  /api/languages          (detectable languages)
                     GET  /api/languages/{name}   (one language)
    - health.py:     GET  /health                 (service health check)

Routes handle HTTP concerns only; detection logic lives in the services
and classifier packages.
"""
