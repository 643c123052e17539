"""Domain layer - Pure business logic.

This layer contains the core business entities, protocols (ports) and
validation rules. The domain layer has NO dependencies on any framework or
infrastructure (Pydantic appears only in the Annotated types of types.py).

Structure:
- entities/: Domain entities (Author, Book)
- protocols/: Repository and logger interfaces
- validators/: Field validation functions and their registry
- types.py: Annotated Pydantic types reusing the validators
"""
