# Routes package init
"""
National Parks API — API Routes Package
=========================================

Route Inventory:
    - parks.py:   GET /parks                  (all parks)
                  GET /parks/{id}             (single park)
                  GET /parks/search/{query}   (fuzzy search on name, description)
    - states.py:  GET /states                 (all states)
                  GET /states/{id}            (single state)
                  GET /states/search/{query}  (fuzzy search on state name)
    - health.py:  GET /health                 (catalog sizes, uptime)

Routes are THIN: extract the path parameter, call the service, return the
result. Status codes for errors come from the global exception handlers.
"""
