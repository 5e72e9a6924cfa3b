"""Application layer - Use cases and orchestration.

This layer contains the catalog use cases following the CQRS pattern:
- Commands: Create, update and delete catalog entities
- Queries: Get and list catalog entities

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: Hierarchy chain resolution shared by handlers
- dtos/: Handler result dataclasses
- errors/: Domain → application error mapping

Handlers assume the access gate has already approved the caller.
"""
