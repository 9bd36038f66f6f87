"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between a request layer and the Domain layer.

Contains:
    - Application services (orchestration)
    - Response DTOs (models)

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - HTTP handling (no HTTP layer in this project)
    - Infrastructure details (belongs to Infrastructure layer)
"""
