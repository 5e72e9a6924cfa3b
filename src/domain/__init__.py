"""Domain layer - catalog model.

Structure:
- entities/: Api, Resource, Operation and the sibling Environment, Plan
  and Developer entities
- enums/: Status, HttpMethod and access gate privilege components
- validators/: Field validation shared by entities and schemas
- errors/: Catalog error constants and NotFound factories
- protocols/: Repository and service ports

The domain layer has no framework or infrastructure dependencies.
"""
