"""AssignAnimal command handler."""

from zoo_keeper.application.commands.sitter_commands import AssignAnimal
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.errors import SitterError
from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class AssignAnimalHandler:
    """Handler for AssignAnimal command.

    Dependencies (injected via constructor):
        - LoggerProtocol: For structured logging
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def handle(self, cmd: AssignAnimal) -> Result[AnimalProtocol, SitterError]:
        """Handle AssignAnimal command.

        Args:
            cmd: AssignAnimal command with sitter and animal.

        Returns:
            Success(animal): Animal now cared for by the sitter.
            Failure(SitterError): ANIMAL_HAS_SITTER.
        """
        result = cmd.sitter.assign(cmd.animal)

        if isinstance(result, Failure):
            self._logger.warning(
                "animal_not_assigned",
                sitter_id=str(cmd.sitter.id),
                animal_name=cmd.animal.name,
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "sitter_appointed",
            sitter_id=str(cmd.sitter.id),
            sitter_name=cmd.sitter.name,
            animal_name=cmd.animal.name,
        )
        return result
