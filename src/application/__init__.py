"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between API, Domain and Infrastructure layers.

Contains:
    - Commands (CQRS write operations)
    - Ports (Protocols implemented by Infrastructure)
    - Application services (use cases)

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - HTTP handling (belongs to API layer)
    - Infrastructure details (belongs to Infrastructure layer)
"""
