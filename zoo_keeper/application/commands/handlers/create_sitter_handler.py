"""CreateSitter command handler.

Creates a sitter and reports which of the given animals it claimed.
Animals that already have a sitter are skipped by the sitter itself;
the handler only makes the skip visible in the logs.
"""

from zoo_keeper.application.commands.sitter_commands import CreateSitter
from zoo_keeper.core.result import Result, Success
from zoo_keeper.domain.entities.sitter import Sitter
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class CreateSitterHandler:
    """Handler for CreateSitter command.

    Dependencies (injected via constructor):
        - LoggerProtocol: For structured logging
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, cmd: CreateSitter) -> Result[Sitter, None]:
        """Handle CreateSitter command.

        Args:
            cmd: CreateSitter command with name and candidate animals.

        Returns:
            Success(sitter): Always; skipped animals are not an error.
        """
        sitter = Sitter(name=cmd.name, animals=list(cmd.animals))
        log = self._logger.bind(sitter_id=str(sitter.id), sitter_name=sitter.name)

        # An animal listed twice is claimed once
        for animal in dict.fromkeys(cmd.animals):
            if animal.sitter is sitter:
                log.info("sitter_appointed", animal_name=animal.name)
            else:
                log.warning("animal_already_claimed", animal_name=animal.name)

        log.info("sitter_created", animal_count=len(sitter.animals))
        return Success(value=sitter)
