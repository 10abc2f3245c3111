# Services package init
"""
National Parks API — Services Layer
=====================================

What:  Everything between the HTTP routes and the JSON files on disk.

Service Inventory:
    - catalog_loader:  parks.json / states.json → Catalog (startup only)
    - matcher:         fuzzy_match(query, target) predicate
    - catalog_service: CatalogService (list, get-by-id, search) per catalog

Routes stay thin: they extract path parameters, call one service method and
return the result. Services can be unit-tested without HTTP.
"""
