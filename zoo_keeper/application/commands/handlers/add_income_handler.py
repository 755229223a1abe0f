"""AddIncome command handler.

Books an income into the zoo budget.

Architecture:
- Application layer handler (orchestrates domain logic)
- Imports only from domain layer (entities, protocols)
- Returns the domain Result unchanged
"""

from decimal import Decimal

from zoo_keeper.application.commands.zoo_commands import AddIncome
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.entities.zoo import Zoo
from zoo_keeper.domain.errors import ZooError
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class AddIncomeHandler:
    """Handler for AddIncome command.

    Dependencies (injected via constructor):
        - Zoo: Aggregate receiving the income
        - LoggerProtocol: For structured logging
    """

    def __init__(self, zoo: Zoo, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            zoo: Zoo aggregate.
            logger: Structured logger.
        """
        self._zoo = zoo
        self._logger = logger

    def handle(self, cmd: AddIncome) -> Result[Decimal, ZooError]:
        """Handle AddIncome command.

        Args:
            cmd: AddIncome command with the amount.

        Returns:
            Success(budget): New budget.
            Failure(ZooError): INCOME_NOT_POSITIVE.
        """
        result = self._zoo.add_income(cmd.amount)

        if isinstance(result, Failure):
            self._logger.warning(
                "income_rejected",
                amount=str(cmd.amount),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info("income_added", amount=str(cmd.amount), budget=str(result.value))
        return result
