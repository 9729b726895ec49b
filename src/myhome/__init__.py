"""MyHome - property management backend.

Layers:
    domain/          # Users, communities, shared errors
    application/     # Login, user flows, community management
    infrastructure/  # SQLAlchemy persistence, mail, security adapters
    presentation/    # FastAPI application, middleware, routers
"""
