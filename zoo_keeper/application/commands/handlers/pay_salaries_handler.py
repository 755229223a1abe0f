"""PaySalaries command handler.

Pays every hired sitter out of the zoo budget, all or nothing.
"""

from decimal import Decimal

from zoo_keeper.application.commands.zoo_commands import PaySalaries
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.entities.zoo import Zoo
from zoo_keeper.domain.errors import ZooError
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class PaySalariesHandler:
    """Handler for PaySalaries command.

    Dependencies (injected via constructor):
        - Zoo: Aggregate paying its sitters
        - LoggerProtocol: For structured logging
    """

    def __init__(self, zoo: Zoo, logger: LoggerProtocol) -> None:
        self._zoo = zoo
        self._logger = logger

    def handle(self, cmd: PaySalaries) -> Result[Decimal, ZooError]:
        """Handle PaySalaries command.

        Args:
            cmd: PaySalaries command.

        Returns:
            Success(budget): New budget.
            Failure(ZooError): NOT_ENOUGH_BUDGET.
        """
        total = self._zoo.total_salaries
        result = self._zoo.pay_salaries()

        if isinstance(result, Failure):
            self._logger.warning(
                "salaries_not_paid",
                total_salaries=str(total),
                budget=str(self._zoo.budget),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "salaries_paid",
            total_salaries=str(total),
            sitter_count=len(self._zoo.sitters),
            budget=str(result.value),
        )
        return result
