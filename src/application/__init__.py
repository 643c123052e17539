"""Application layer - Use cases and orchestration.

Every use case is a request object (command or query) handled by exactly
one handler and dispatched through the Mediator:
- Commands: Write operations that change authors or books
- Queries: Read operations that fetch authors or books

Structure:
- mediator/: Request dispatcher (Request, Unit, CancellationToken, Mediator)
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Handler result objects
- cqrs/: Registry of all commands and queries (handler wiring source)
- errors/: ApplicationError and DomainError classification

The application layer orchestrates domain logic but contains no business rules.
"""
