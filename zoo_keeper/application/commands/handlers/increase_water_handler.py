"""IncreaseWater command handler."""

from decimal import Decimal

from zoo_keeper.application.commands.zoo_commands import IncreaseWater
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.entities.zoo import Zoo
from zoo_keeper.domain.errors import ZooError
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class IncreaseWaterHandler:
    """Handler for IncreaseWater command.

    Dependencies (injected via constructor):
        - Zoo: Aggregate whose allowance grows
        - LoggerProtocol: For structured logging
    """

    def __init__(self, zoo: Zoo, logger: LoggerProtocol) -> None:
        self._zoo = zoo
        self._logger = logger

    def handle(self, cmd: IncreaseWater) -> Result[Decimal, ZooError]:
        """Handle IncreaseWater command.

        Returns:
            Success(water_limit): New water allowance.
            Failure(ZooError): WATER_LIMIT_NOT_POSITIVE.
        """
        result = self._zoo.increase_water(cmd.amount)

        if isinstance(result, Failure):
            self._logger.warning(
                "water_increase_rejected",
                amount=str(cmd.amount),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "water_limit_increased", amount=str(cmd.amount), water_limit=str(result.value)
        )
        return result
