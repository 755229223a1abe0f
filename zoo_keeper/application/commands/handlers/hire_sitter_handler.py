"""HireSitter command handler.

Hires a sitter if they are not already on staff and the budget covers
every salary including theirs. Hiring itself does not spend budget.
"""

from zoo_keeper.application.commands.zoo_commands import HireSitter
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.entities.zoo import Zoo
from zoo_keeper.domain.errors import ZooError
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol
from zoo_keeper.domain.protocols.sitter_protocol import SitterProtocol


class HireSitterHandler:
    """Handler for HireSitter command.

    Dependencies (injected via constructor):
        - Zoo: Aggregate hiring the sitter
        - LoggerProtocol: For structured logging
    """

    def __init__(self, zoo: Zoo, logger: LoggerProtocol) -> None:
        self._zoo = zoo
        self._logger = logger

    def handle(self, cmd: HireSitter) -> Result[SitterProtocol, ZooError]:
        """Handle HireSitter command.

        Args:
            cmd: HireSitter command with the sitter.

        Returns:
            Success(sitter): Sitter hired.
            Failure(ZooError): SITTER_EXISTS or NOT_ENOUGH_BUDGET.
        """
        result = self._zoo.add_sitter(cmd.sitter)

        if isinstance(result, Failure):
            self._logger.warning(
                "sitter_not_hired",
                sitter_id=str(cmd.sitter.id),
                sitter_name=cmd.sitter.name,
                salary=str(cmd.sitter.salary),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "sitter_hired",
            sitter_id=str(cmd.sitter.id),
            sitter_name=cmd.sitter.name,
            total_salaries=str(self._zoo.total_salaries),
        )
        return result
