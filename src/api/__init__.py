"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface of the submission proxy. Handles requests and responses,
    delegates to Application Layer use cases. No business logic.

Contains:
    - FastAPI routers (applications)
    - Request/Response models (Pydantic)
    - Dependency injection setup
    - Middleware configuration (CORS, logging)

Does NOT contain:
    - Business logic (belongs to Domain layer)
    - Orchestration (belongs to Application layer)
    - Outbound HTTP calls (belongs to Infrastructure layer)
"""
