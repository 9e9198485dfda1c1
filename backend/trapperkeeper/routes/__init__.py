# Routes package init
"""
Trapper Keeper Backend — API Routes Package
============================================

Route Inventory (notes routes mounted under settings.api_prefix, /api/v1 by default):
    - notes.py:   GET    /notes          (list every note)
                  POST   /notes          (create a note)
                  GET    /notes/{id}     (get one note)
                  PUT    /notes/{id}     (fully replace a note)
                  DELETE /notes/{id}     (delete a note)
    - health.py:  GET    /health         (service health check)

Routes stay thin: pull the body and path id out of the request, call the
note service with the app's store, pick the status code.
"""
