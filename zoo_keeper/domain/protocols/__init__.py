"""Domain protocols (ports) package.

Capability sets the domain depends on. Entities and adapters satisfy them
structurally (PEP 544) without inheriting from them.

Usage:
    from zoo_keeper.domain.protocols import AnimalProtocol, SitterProtocol
    from zoo_keeper.domain.protocols import LoggerProtocol
"""

from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol
from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol

__all__ = [
    "AnimalProtocol",
    "LoggerProtocol",
    "SitterProtocol",
]
