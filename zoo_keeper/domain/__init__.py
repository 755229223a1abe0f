"""Domain layer - Pure business logic.

Entities (animals, sitters, the zoo aggregate), protocols (ports) and
error kinds. The domain layer has NO dependencies on logging, settings or
any other infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- protocols/: Capability sets and service interfaces
- errors/: Rejection kinds returned inside Failure
- validators/: Input coercion shared by entities
"""
