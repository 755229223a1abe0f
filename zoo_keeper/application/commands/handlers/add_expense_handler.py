"""AddExpense command handler.

Books an expense against the zoo budget. The budget never goes negative:
an expense larger than the budget is rejected.
"""

from decimal import Decimal

from zoo_keeper.application.commands.zoo_commands import AddExpense
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.entities.zoo import Zoo
from zoo_keeper.domain.errors import ZooError
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class AddExpenseHandler:
    """Handler for AddExpense command.

    Dependencies (injected via constructor):
        - Zoo: Aggregate paying the expense
        - LoggerProtocol: For structured logging
    """

    def __init__(self, zoo: Zoo, logger: LoggerProtocol) -> None:
        self._zoo = zoo
        self._logger = logger

    def handle(self, cmd: AddExpense) -> Result[Decimal, ZooError]:
        """Handle AddExpense command.

        Args:
            cmd: AddExpense command with the amount.

        Returns:
            Success(budget): New budget.
            Failure(ZooError): EXPENSE_NOT_POSITIVE or NOT_ENOUGH_BUDGET.
        """
        result = self._zoo.add_expense(cmd.amount)

        if isinstance(result, Failure):
            self._logger.warning(
                "expense_rejected",
                amount=str(cmd.amount),
                budget=str(self._zoo.budget),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "expense_added", amount=str(cmd.amount), budget=str(result.value)
        )
        return result
