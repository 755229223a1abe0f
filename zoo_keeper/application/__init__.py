"""Application layer - Use cases and orchestration.

Commands express the intent to change zoo state; handlers execute them
against the domain and log the outcome. The application layer contains
no business rules: every guard lives on the entities.

Structure:
- commands/: Command dataclasses and handlers (write operations)
"""
